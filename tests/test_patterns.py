"""Tests for src/pkgdocs/sources/patterns.py: candidate generators and heuristics."""

import pytest

from pkgdocs.sources.patterns import (
    Candidate,
    generic_patterns,
    github_pages_url,
    homepage_confidence,
    is_disqualified_homepage,
    is_doc_shaped_path,
    is_docs_url,
    matches_doc_pattern,
    normalize_path,
    org_patterns,
    path_depth,
    readthedocs_slug,
    split_scoped_name,
    title_from_path,
)

# -----------------------------------------------------------------------
# Homepage heuristics
# -----------------------------------------------------------------------


class TestHomepageHeuristics:
    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/owner/repo#readme",
            "https://www.github.com/owner/repo",
            "https://gitlab.com/owner/repo",
            "https://bitbucket.org/owner/repo",
            "https://www.npmjs.com/package/foo",
            "not a url",
            "ftp://example.com",
        ],
    )
    def test_disqualified(self, url):
        assert is_disqualified_homepage(url)

    @pytest.mark.parametrize(
        "url",
        [
            "https://owner.github.io/repo/",
            "https://example.com",
            "https://docs.example.org/",
        ],
    )
    def test_not_disqualified(self, url):
        """GitHub Pages sites are frequently the docs, so they stay eligible."""
        assert not is_disqualified_homepage(url)

    @pytest.mark.parametrize(
        "url",
        [
            "https://docs.example.com",
            "https://example.com/documentation",
            "https://example.com/guide/",
            "https://zod.dev",
            "https://socket.io",
            "https://owner.github.io/repo",
        ],
    )
    def test_high_confidence(self, url):
        assert homepage_confidence(url) == "high"

    @pytest.mark.parametrize("url", ["https://lodash.com", "https://example.org/"])
    def test_medium_confidence(self, url):
        assert homepage_confidence(url) == "medium"


# -----------------------------------------------------------------------
# Path heuristics
# -----------------------------------------------------------------------


class TestPathHeuristics:
    @pytest.mark.parametrize(
        "path",
        ["/docs/intro", "/doc/x", "/guide/start", "/api/core", "/reference/x", "/getting-started"],
    )
    def test_doc_patterns(self, path):
        assert matches_doc_pattern(path)

    def test_marketing_path_not_doc_pattern(self):
        assert not matches_doc_pattern("/pricing")
        assert not is_doc_shaped_path("/pricing")

    def test_doc_shaped_by_substring(self):
        assert is_doc_shaped_path("/en/api-docs")

    def test_path_depth(self):
        assert path_depth("/") == 0
        assert path_depth("/a/b/") == 2

    def test_normalize_path(self):
        assert normalize_path("/docs/intro/?x=1#top") == "/docs/intro"
        assert normalize_path("/") == "/"
        assert normalize_path("docs") == "/docs"

    def test_title_from_path(self):
        assert title_from_path("/docs/getting-started") == "Getting Started"
        assert title_from_path("/docs/api_reference.html") == "Api Reference"
        assert title_from_path("/") == "Unknown"

    def test_is_docs_url(self):
        assert is_docs_url("https://docs.example.com/")
        assert is_docs_url("https://example.com/reference/x")
        assert not is_docs_url("https://example.com/blog")


# -----------------------------------------------------------------------
# Organization patterns
# -----------------------------------------------------------------------


class TestOrgPatterns:
    def test_split_scoped_name(self):
        assert split_scoped_name("@Org/pkg") == ("org", "pkg")
        assert split_scoped_name("lodash") is None
        assert split_scoped_name("@broken") is None

    def test_unscoped_yields_nothing(self):
        assert org_patterns("lodash") == []

    def test_unknown_org_yields_nothing(self):
        assert org_patterns("@nobody-knows/pkg") == []

    def test_aws_client_prefix_stripped(self):
        candidates = org_patterns("@aws-sdk/client-lambda")
        assert candidates[0] == Candidate(
            "https://docs.aws.amazon.com/AWSJavaScriptSDK/v3/latest/client/lambda/", "high"
        )
        assert all(c.confidence == "high" for c in candidates)

    def test_aws_special_case(self):
        candidates = org_patterns("@aws-sdk/client-cognito-identity-provider")
        assert candidates[0].url.endswith("/client/cognito-identity-provider/")

    def test_mui_special_case(self):
        """Package 'material' lives under /material-ui/."""
        candidates = org_patterns("@mui/material")
        assert candidates[0].url == "https://mui.com/material-ui/getting-started/"

    def test_tanstack_framework_prefix(self):
        assert org_patterns("@tanstack/vue-table")[0].url == "https://tanstack.com/table/latest/docs"

    def test_static_org_template(self):
        assert org_patterns("@nestjs/core") == [Candidate("https://docs.nestjs.com/", "high")]


# -----------------------------------------------------------------------
# Generic patterns
# -----------------------------------------------------------------------


class TestGenericPatterns:
    def test_full_candidate_order(self):
        candidates = generic_patterns(
            "my-lib",
            homepage="https://www.mylib.com/",
            github_url="https://github.com/owner/my-lib",
        )
        assert candidates == [
            Candidate("https://docs.mylib.com/", "high"),
            Candidate("https://www.mylib.com/docs", "high"),
            Candidate("https://www.mylib.com/documentation", "medium"),
            Candidate("https://www.mylib.com/guide", "medium"),
            Candidate("https://owner.github.io/my-lib/", "medium"),
            Candidate("https://my-lib.readthedocs.io/", "medium"),
        ]

    def test_repository_homepage_skips_homepage_candidates(self):
        candidates = generic_patterns(
            "pkg",
            homepage="https://github.com/owner/pkg#readme",
            github_url="https://github.com/owner/pkg",
        )
        urls = [c.url for c in candidates]
        assert urls == ["https://owner.github.io/pkg/", "https://pkg.readthedocs.io/"]

    def test_docs_host_has_no_docs_subdomain(self):
        urls = [c.url for c in generic_patterns("x", homepage="https://docs.x.dev")]
        assert "https://docs.docs.x.dev/" not in urls
        assert urls[0] == "https://docs.x.dev/docs"

    def test_name_only(self):
        assert generic_patterns("@scope/my.pkg") == [
            Candidate("https://scope-my-pkg.readthedocs.io/", "medium")
        ]

    def test_readthedocs_slug(self):
        assert readthedocs_slug("@Scope/Pkg") == "scope-pkg"

    def test_github_pages_user_site(self):
        assert github_pages_url("https://github.com/Owner/owner.github.io") == "https://owner.github.io/"
        assert github_pages_url("https://gitlab.com/a/b") is None
