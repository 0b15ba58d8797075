"""Curated documentation URLs for packages whose registry metadata misleads.

Entries here are trusted outright: a hit yields ``high`` confidence and
skips every probing tier.
"""

KNOWN_DOCS_OVERRIDES: dict[str, str] = {
    # --- Utilities / dates ---
    "lodash": "https://lodash.com/docs",
    "axios": "https://axios-http.com/docs/intro",
    "moment": "https://momentjs.com/docs/",
    "dayjs": "https://day.js.org/docs/en/installation/installation",
    "date-fns": "https://date-fns.org/docs/Getting-Started",
    "ramda": "https://ramdajs.com/docs/",
    "rxjs": "https://rxjs.dev/guide/overview",
    "immer": "https://immerjs.github.io/immer/",
    # --- Validation ---
    "zod": "https://zod.dev",
    "yup": "https://github.com/jquense/yup#readme",
    "joi": "https://joi.dev/api/",
    # --- Servers / APIs ---
    "express": "https://expressjs.com/en/api.html",
    "fastify": "https://fastify.dev/docs/latest/",
    "koa": "https://koajs.com/",
    "hono": "https://hono.dev/docs/",
    "elysia": "https://elysiajs.com/introduction.html",
    "trpc": "https://trpc.io/docs",
    "@trpc/server": "https://trpc.io/docs",
    "@trpc/client": "https://trpc.io/docs",
    "graphql": "https://graphql.org/learn/",
    "apollo-server": "https://www.apollographql.com/docs/apollo-server/",
    "@apollo/client": "https://www.apollographql.com/docs/react/",
    "urql": "https://commerce.nearform.com/open-source/urql/docs/",
    "socket.io": "https://socket.io/docs/v4/",
    "socket.io-client": "https://socket.io/docs/v4/client-api/",
    "ws": "https://github.com/websockets/ws#readme",
    # --- Data fetching / state ---
    "swr": "https://swr.vercel.app/docs/getting-started",
    "@tanstack/react-query": "https://tanstack.com/query/latest/docs/react/overview",
    "@tanstack/vue-query": "https://tanstack.com/query/latest/docs/vue/overview",
    "zustand": "https://docs.pmnd.rs/zustand/getting-started/introduction",
    "jotai": "https://jotai.org/docs/introduction",
    "recoil": "https://recoiljs.org/docs/introduction/getting-started",
    "mobx": "https://mobx.js.org/README.html",
    "redux": "https://redux.js.org/introduction/getting-started",
    "@reduxjs/toolkit": "https://redux-toolkit.js.org/introduction/getting-started",
    # --- Graphics / animation ---
    "three": "https://threejs.org/docs/",
    "d3": "https://d3js.org/getting-started",
    "chart.js": "https://www.chartjs.org/docs/latest/",
    "echarts": "https://echarts.apache.org/en/option.html",
    "framer-motion": "https://www.framer.com/motion/",
    "react-spring": "https://www.react-spring.dev/docs/getting-started",
    "gsap": "https://gsap.com/docs/v3/",
    "anime": "https://animejs.com/documentation/",
    # --- Databases / ORMs ---
    "mongoose": "https://mongoosejs.com/docs/guide.html",
    "sequelize": "https://sequelize.org/docs/v6/",
    "typeorm": "https://typeorm.io/",
    "knex": "https://knexjs.org/guide/",
    "drizzle-orm": "https://orm.drizzle.team/docs/overview",
    "kysely": "https://kysely.dev/docs/intro",
    "@supabase/supabase-js": "https://supabase.com/docs/reference/javascript/introduction",
    "firebase": "https://firebase.google.com/docs",
    # --- Cloud / payments / auth ---
    "aws-sdk": "https://docs.aws.amazon.com/AWSJavaScriptSDK/v3/latest/",
    "@aws-sdk/client-s3": "https://docs.aws.amazon.com/AWSJavaScriptSDK/v3/latest/",
    "stripe": "https://stripe.com/docs/api",
    "next-auth": "https://next-auth.js.org/getting-started/introduction",
    "passport": "https://www.passportjs.org/docs/",
    "jsonwebtoken": "https://github.com/auth0/node-jsonwebtoken#readme",
    "bcrypt": "https://github.com/kelektiv/node.bcrypt.js#readme",
    "helmet": "https://helmetjs.github.io/",
    "cors": "https://github.com/expressjs/cors#readme",
    "dotenv": "https://github.com/motdotla/dotenv#readme",
    # --- Logging ---
    "winston": "https://github.com/winstonjs/winston#readme",
    "pino": "https://getpino.io/#/",
    # --- Testing / automation ---
    "jest": "https://jestjs.io/docs/getting-started",
    "vitest": "https://vitest.dev/guide/",
    "mocha": "https://mochajs.org/",
    "cypress": "https://docs.cypress.io/guides/overview/why-cypress",
    "playwright": "https://playwright.dev/docs/intro",
    "puppeteer": "https://pptr.dev/",
    "cheerio": "https://cheerio.js.org/docs/intro",
    # --- Media ---
    "sharp": "https://sharp.pixelplumbing.com/",
    "jimp": "https://jimp-dev.github.io/jimp/",
    # --- HTTP / uploads ---
    "node-fetch": "https://github.com/node-fetch/node-fetch#readme",
    "got": "https://github.com/sindresorhus/got#readme",
    "ky": "https://github.com/sindresorhus/ky#readme",
    "form-data": "https://github.com/form-data/form-data#readme",
    "multer": "https://github.com/expressjs/multer#readme",
    "formidable": "https://github.com/node-formidable/formidable#readme",
    # --- Ids / strings ---
    "uuid": "https://github.com/uuidjs/uuid#readme",
    "nanoid": "https://github.com/ai/nanoid#readme",
    "slugify": "https://github.com/simov/slugify#readme",
    # --- Markdown / templating ---
    "marked": "https://marked.js.org/",
    "markdown-it": "https://markdown-it.github.io/",
    "highlight": "https://highlightjs.org/",
    "prismjs": "https://prismjs.com/",
    "handlebars": "https://handlebarsjs.com/guide/",
    "ejs": "https://ejs.co/",
    "pug": "https://pugjs.org/api/getting-started.html",
    # --- Styling ---
    "sass": "https://sass-lang.com/documentation/",
    "less": "https://lesscss.org/",
    "postcss": "https://postcss.org/docs/",
    "autoprefixer": "https://github.com/postcss/autoprefixer#readme",
    "tailwindcss": "https://tailwindcss.com/docs",
    "styled-components": "https://styled-components.com/docs",
    "emotion": "https://emotion.sh/docs/introduction",
    "@emotion/react": "https://emotion.sh/docs/introduction",
    "class-variance-authority": "https://cva.style/docs",
    "clsx": "https://github.com/lukeed/clsx#readme",
    "tailwind-merge": "https://github.com/dcastil/tailwind-merge#readme",
}


def get_known_docs_url(name: str) -> str | None:
    """Exact-name lookup in the override table."""
    return KNOWN_DOCS_OVERRIDES.get(name)
