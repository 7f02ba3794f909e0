import logging
from typing import Any, Dict, List

from github_dashboard.domain.models import (
    ActivityDataset,
    DashboardMetricUpsert,
    GithubProfileUpsert,
    RepositoryUpsert,
    TechnologyUpsert,
    WeeklyActivity,
)
from github_dashboard.infrastructure.acl import format_growth
from github_dashboard.infrastructure.memory_store import MemoryStore

logger = logging.getLogger(__name__)

DEFAULT_METRICS: List[Dict[str, Any]] = [
    {"metric_type": "users", "total": 2847102, "growth_percentage": "+12.5%"},
    {"metric_type": "repositories", "total": 15708931, "growth_percentage": "+8.3%"},
    {"metric_type": "stars", "total": 7415644, "growth_percentage": "+15.7%"},
    {"metric_type": "activity", "total": 10847, "growth_percentage": "+23.1%"},
]

DEFAULT_TECHNOLOGIES: List[Dict[str, Any]] = [
    # Programming languages
    {"name": "JavaScript", "icon": "fab fa-js-square", "color": "#F7DF1E", "percentage": 85, "repos_count": 2847102},
    {"name": "Python", "icon": "fab fa-python", "color": "#3776AB", "percentage": 78, "repos_count": 2345891},
    {"name": "TypeScript", "icon": "fas fa-code", "color": "#3178C6", "percentage": 72, "repos_count": 1987543},
    {"name": "Java", "icon": "fab fa-java", "color": "#ED8B00", "percentage": 65, "repos_count": 1765432},
    {"name": "C#", "icon": "fas fa-hashtag", "color": "#239120", "percentage": 58, "repos_count": 1543210},
    {"name": "Go", "icon": "fas fa-bolt", "color": "#00ADD8", "percentage": 45, "repos_count": 987654},
    {"name": "Rust", "icon": "fas fa-gear", "color": "#000000", "percentage": 38, "repos_count": 765432},
    {"name": "Ruby", "icon": "fab fa-ruby", "color": "#CC342D", "percentage": 42, "repos_count": 654321},
    {"name": "PHP", "icon": "fab fa-php", "color": "#777BB4", "percentage": 55, "repos_count": 1234567},
    {"name": "C++", "icon": "fas fa-code", "color": "#00599C", "percentage": 35, "repos_count": 543210},
    {"name": "C", "icon": "fas fa-code", "color": "#A8B9CC", "percentage": 32, "repos_count": 432109},
    {"name": "Swift", "icon": "fab fa-swift", "color": "#FA7343", "percentage": 28, "repos_count": 321098},
    {"name": "Kotlin", "icon": "fas fa-mobile-alt", "color": "#0095D5", "percentage": 31, "repos_count": 398765},
    {"name": "Dart", "icon": "fas fa-dart-board", "color": "#0175C2", "percentage": 25, "repos_count": 287654},
    # Frontend frameworks
    {"name": "React", "icon": "fab fa-react", "color": "#61DAFB", "percentage": 67, "repos_count": 1876543},
    {"name": "Vue.js", "icon": "fab fa-vuejs", "color": "#4FC08D", "percentage": 54, "repos_count": 1345678},
    {"name": "Angular", "icon": "fab fa-angular", "color": "#DD0031", "percentage": 48, "repos_count": 1098765},
    {"name": "Svelte", "icon": "fas fa-fire", "color": "#FF3E00", "percentage": 22, "repos_count": 234567},
    {"name": "Next.js", "icon": "fas fa-forward", "color": "#000000", "percentage": 43, "repos_count": 876543},
    {"name": "Nuxt.js", "icon": "fas fa-mountain", "color": "#00DC82", "percentage": 18, "repos_count": 198765},
    {"name": "Gatsby", "icon": "fas fa-rocket", "color": "#663399", "percentage": 15, "repos_count": 165432},
    # Backend frameworks
    {"name": "Express.js", "icon": "fas fa-server", "color": "#000000", "percentage": 52, "repos_count": 1123456},
    {"name": "Django", "icon": "fas fa-python", "color": "#092E20", "percentage": 41, "repos_count": 876543},
    {"name": "Flask", "icon": "fas fa-flask", "color": "#000000", "percentage": 35, "repos_count": 654321},
    {"name": "Spring Boot", "icon": "fas fa-leaf", "color": "#6DB33F", "percentage": 39, "repos_count": 798765},
    {"name": "Laravel", "icon": "fab fa-laravel", "color": "#FF2D20", "percentage": 33, "repos_count": 567890},
    {"name": "Ruby on Rails", "icon": "fab fa-ruby", "color": "#CC0000", "percentage": 28, "repos_count": 456789},
    {"name": "ASP.NET Core", "icon": "fas fa-microsoft", "color": "#512BD4", "percentage": 26, "repos_count": 398765},
    {"name": "FastAPI", "icon": "fas fa-lightning", "color": "#009688", "percentage": 21, "repos_count": 287654},
    # Databases
    {"name": "PostgreSQL", "icon": "fas fa-database", "color": "#336791", "percentage": 44, "repos_count": 987654},
    {"name": "MySQL", "icon": "fas fa-database", "color": "#4479A1", "percentage": 48, "repos_count": 1098765},
    {"name": "MongoDB", "icon": "fas fa-leaf", "color": "#47A248", "percentage": 38, "repos_count": 765432},
    {"name": "Redis", "icon": "fas fa-memory", "color": "#DC382D", "percentage": 32, "repos_count": 543210},
    {"name": "SQLite", "icon": "fas fa-database", "color": "#003B57", "percentage": 29, "repos_count": 432109},
    {"name": "MariaDB", "icon": "fas fa-database", "color": "#003545", "percentage": 18, "repos_count": 234567},
    {"name": "Elasticsearch", "icon": "fas fa-search", "color": "#005571", "percentage": 15, "repos_count": 187654},
    {"name": "CouchDB", "icon": "fas fa-couch", "color": "#E42528", "percentage": 8, "repos_count": 98765},
    # Mobile
    {"name": "React Native", "icon": "fab fa-react", "color": "#61DAFB", "percentage": 34, "repos_count": 654321},
    {"name": "Flutter", "icon": "fas fa-mobile", "color": "#02569B", "percentage": 28, "repos_count": 456789},
    {"name": "Ionic", "icon": "fas fa-mobile-alt", "color": "#3880FF", "percentage": 19, "repos_count": 234567},
    {"name": "Xamarin", "icon": "fas fa-mobile", "color": "#3498DB", "percentage": 12, "repos_count": 156789},
    # DevOps & cloud
    {"name": "Docker", "icon": "fab fa-docker", "color": "#2496ED", "percentage": 56, "repos_count": 1234567},
    {"name": "Kubernetes", "icon": "fas fa-ship", "color": "#326CE5", "percentage": 42, "repos_count": 876543},
    {"name": "AWS", "icon": "fab fa-aws", "color": "#FF9900", "percentage": 38, "repos_count": 765432},
    {"name": "Azure", "icon": "fab fa-microsoft", "color": "#0078D4", "percentage": 29, "repos_count": 456789},
    {"name": "Google Cloud", "icon": "fab fa-google", "color": "#4285F4", "percentage": 24, "repos_count": 345678},
    {"name": "Terraform", "icon": "fas fa-layer-group", "color": "#623CE4", "percentage": 18, "repos_count": 234567},
    # AI / ML libraries
    {"name": "TensorFlow", "icon": "fas fa-brain", "color": "#FF6F00", "percentage": 36, "repos_count": 687654},
    {"name": "PyTorch", "icon": "fas fa-fire", "color": "#EE4C2C", "percentage": 31, "repos_count": 567890},
    {"name": "scikit-learn", "icon": "fas fa-chart-line", "color": "#F7931E", "percentage": 28, "repos_count": 456789},
    {"name": "Pandas", "icon": "fas fa-table", "color": "#150458", "percentage": 33, "repos_count": 598765},
    {"name": "NumPy", "icon": "fas fa-calculator", "color": "#013243", "percentage": 35, "repos_count": 634567},
]


def _avatar(user_id: int) -> str:
    return f"https://avatars.githubusercontent.com/u/{user_id}?v=4"


DEFAULT_PROFILES: List[Dict[str, Any]] = [
    {"username": "torvalds", "name": "Linus Torvalds", "avatar_url": _avatar(1024025), "followers": 180000, "following": 0, "public_repos": 6, "bio": "Creator of Linux and Git", "location": "Portland, OR", "company": "Linux Foundation", "blog": None},
    {"username": "gaearon", "name": "Dan Abramov", "avatar_url": _avatar(810438), "followers": 95000, "following": 171, "public_repos": 72, "bio": "Working on @reactjs. Co-author of Redux and Create React App.", "location": "London, UK", "company": "@facebook", "blog": "https://overreacted.io"},
    {"username": "addyosmani", "name": "Addy Osmani", "avatar_url": _avatar(110953), "followers": 42000, "following": 1705, "public_repos": 115, "bio": "Engineering Manager @ Google working on Chrome", "location": "Mountain View, CA", "company": "Google", "blog": "https://addyosmani.com"},
    {"username": "sindresorhus", "name": "Sindre Sorhus", "avatar_url": _avatar(170270), "followers": 38000, "following": 45, "public_repos": 1200, "bio": "Open source maintainer, Node.js expert", "location": "Oslo, Norway", "company": None, "blog": "https://sindresorhus.com"},
    {"username": "tj", "name": "TJ Holowaychuk", "avatar_url": _avatar(25254), "followers": 35000, "following": 12, "public_repos": 280, "bio": "Creator of Express.js and many other tools", "location": "Victoria, BC", "company": None, "blog": "https://tjholowaychuk.com"},
    {"username": "yyx990803", "name": "Evan You", "avatar_url": _avatar(499550), "followers": 48000, "following": 15, "public_repos": 95, "bio": "Creator of Vue.js", "location": "Singapore", "company": "Independent", "blog": "https://evanyou.me"},
    {"username": "jashkenas", "name": "Jeremy Ashkenas", "avatar_url": _avatar(4732), "followers": 25000, "following": 120, "public_repos": 85, "bio": "Creator of Backbone.js, Underscore.js, CoffeeScript", "location": "New York, NY", "company": "The New York Times", "blog": None},
    {"username": "defunkt", "name": "Chris Wanstrath", "avatar_url": _avatar(2), "followers": 21000, "following": 208, "public_repos": 107, "bio": "Co-founder of GitHub", "location": "San Francisco, CA", "company": "GitHub", "blog": "https://chriswanstrath.com"},
    {"username": "mdo", "name": "Mark Otto", "avatar_url": _avatar(98681), "followers": 28000, "following": 168, "public_repos": 90, "bio": "Creator of Bootstrap", "location": "San Francisco, CA", "company": "GitHub", "blog": "https://markdotto.com"},
    {"username": "fat", "name": "Jacob Thornton", "avatar_url": _avatar(169705), "followers": 15000, "following": 95, "public_repos": 45, "bio": "Co-creator of Bootstrap", "location": "San Francisco, CA", "company": "Medium", "blog": None},
    {"username": "mikeal", "name": "Mikeal Rogers", "avatar_url": _avatar(579), "followers": 12000, "following": 312, "public_repos": 156, "bio": "Open source advocate, creator of request module", "location": "San Francisco, CA", "company": "Protocol Labs", "blog": "https://mikealrogers.com"},
    {"username": "jeresig", "name": "John Resig", "avatar_url": _avatar(761), "followers": 32000, "following": 89, "public_repos": 67, "bio": "Creator of jQuery", "location": "Brooklyn, NY", "company": "Khan Academy", "blog": "https://johnresig.com"},
    {"username": "schacon", "name": "Scott Chacon", "avatar_url": _avatar(70), "followers": 18000, "following": 145, "public_repos": 234, "bio": "Co-founder of GitHub, Git expert", "location": "San Francisco, CA", "company": "GitHub", "blog": "https://scottchacon.com"},
    {"username": "dhh", "name": "David Heinemeier Hansson", "avatar_url": _avatar(2741), "followers": 45000, "following": 0, "public_repos": 78, "bio": "Creator of Ruby on Rails", "location": "Chicago, IL", "company": "Basecamp", "blog": "https://dhh.dk"},
    {"username": "taylorotwell", "name": "Taylor Otwell", "avatar_url": _avatar(463230), "followers": 24000, "following": 0, "public_repos": 89, "bio": "Creator of Laravel", "location": "Little Rock, AR", "company": "Laravel", "blog": "https://taylorotwell.com"},
    {"username": "mxstbr", "name": "Max Stoiber", "avatar_url": _avatar(7525670), "followers": 16000, "following": 234, "public_repos": 145, "bio": "Creator of styled-components", "location": "Vienna, Austria", "company": "Gatsby", "blog": "https://mxstbr.com"},
    {"username": "wesbos", "name": "Wes Bos", "avatar_url": _avatar(176013), "followers": 22000, "following": 45, "public_repos": 156, "bio": "Full Stack Developer & Teacher", "location": "Hamilton, ON", "company": "Independent", "blog": "https://wesbos.com"},
    {"username": "kentcdodds", "name": "Kent C. Dodds", "avatar_url": _avatar(1500684), "followers": 19000, "following": 78, "public_repos": 234, "bio": "JavaScript and React expert, educator", "location": "Utah, USA", "company": "Independent", "blog": "https://kentcdodds.com"},
    {"username": "getify", "name": "Kyle Simpson", "avatar_url": _avatar(150330), "followers": 17000, "following": 23, "public_repos": 123, "bio": "Author of You Dont Know JS", "location": "Austin, TX", "company": "Independent", "blog": "https://me.getify.com"},
    {"username": "paulirish", "name": "Paul Irish", "avatar_url": _avatar(39191), "followers": 26000, "following": 312, "public_repos": 189, "bio": "Developer advocate at Google Chrome", "location": "Mountain View, CA", "company": "Google", "blog": "https://paulirish.com"},
    {"username": "feross", "name": "Feross Aboukhadijeh", "avatar_url": _avatar(121766), "followers": 14000, "following": 89, "public_repos": 267, "bio": "Creator of WebTorrent, StandardJS", "location": "Palo Alto, CA", "company": "Independent", "blog": "https://feross.org"},
    {"username": "Rich-Harris", "name": "Rich Harris", "avatar_url": _avatar(1162160), "followers": 20000, "following": 156, "public_repos": 178, "bio": "Creator of Svelte and Rollup", "location": "New York, NY", "company": "The New York Times", "blog": "https://rich-harris.dev"},
    {"username": "ryanflorence", "name": "Ryan Florence", "avatar_url": _avatar(100200), "followers": 15000, "following": 234, "public_repos": 145, "bio": "Co-creator of React Router and Reach UI", "location": "Salt Lake City, UT", "company": "React Training", "blog": "https://ryanflorence.com"},
    {"username": "bradtraversy", "name": "Brad Traversy", "avatar_url": _avatar(5550850), "followers": 13000, "following": 67, "public_repos": 289, "bio": "Web developer and educator", "location": "Massachusetts, USA", "company": "Traversy Media", "blog": "https://traversymedia.com"},
    {"username": "mpj", "name": "Mattias Petter Johansson", "avatar_url": _avatar(994739), "followers": 11000, "following": 123, "public_repos": 134, "bio": "Creator of Fun Fun Function", "location": "Stockholm, Sweden", "company": "Independent", "blog": "https://youtube.com/funfunfunction"},
    {"username": "ThePrimeagen", "name": "Michael Paulson", "avatar_url": _avatar(4458174), "followers": 25000, "following": 45, "public_repos": 167, "bio": "Software engineer and content creator", "location": "Utah, USA", "company": "Netflix", "blog": "https://theprimeagen.tv"},
    {"username": "jakearchibald", "name": "Jake Archibald", "avatar_url": _avatar(93594), "followers": 18000, "following": 234, "public_repos": 123, "bio": "Developer advocate at Google Chrome", "location": "Brighton, UK", "company": "Google", "blog": "https://jakearchibald.com"},
    {"username": "BrendanEich", "name": "Brendan Eich", "avatar_url": _avatar(10565), "followers": 52000, "following": 12, "public_repos": 34, "bio": "Creator of JavaScript", "location": "Palo Alto, CA", "company": "Brave Software", "blog": "https://brendaneich.com"},
    {"username": "substack", "name": "James Halliday", "avatar_url": _avatar(12631), "followers": 16000, "following": 189, "public_repos": 567, "bio": "Node.js modules creator", "location": "Oakland, CA", "company": "Independent", "blog": "https://substack.net"},
    {"username": "remy", "name": "Remy Sharp", "avatar_url": _avatar(13700), "followers": 12000, "following": 256, "public_repos": 234, "bio": "Creator of JSBin, web developer", "location": "Brighton, UK", "company": "Left Logic", "blog": "https://remysharp.com"},
]

# (github_id, name, full_name, description, language, stars, forks, today_stars)
DEFAULT_REPOSITORIES = [
    (908531752, "next.js", "vercel/next.js", "The React Framework for Production", "JavaScript", 125000, 28000, 142),
    (10270250, "react", "facebook/react", "A declarative, efficient, and flexible JavaScript library for building user interfaces.", "JavaScript", 228000, 46500, 95),
    (11730342, "vue", "vuejs/vue", "Vue.js is a progressive, incrementally-adoptable JavaScript framework for building UI on the web.", "TypeScript", 207000, 33700, 78),
    (83222441, "angular", "angular/angular", "Deliver web apps with confidence", "TypeScript", 95800, 25200, 62),
    (165262382, "svelte", "sveltejs/svelte", "Cybernetically enhanced web apps", "TypeScript", 78600, 4100, 89),
    (27193779, "tensorflow", "tensorflow/tensorflow", "An Open Source Machine Learning Framework for Everyone", "Python", 185000, 74100, 156),
    (65600975, "pytorch", "pytorch/pytorch", "Tensors and Dynamic neural networks in Python with strong GPU acceleration", "Python", 81900, 22000, 134),
    (44838949, "kubernetes", "kubernetes/kubernetes", "Production-Grade Container Scheduling and Management", "Go", 109000, 39200, 98),
    (13491895, "docker", "moby/moby", "Moby Project - a collaborative project for the container ecosystem", "Go", 68400, 18700, 67),
    (8514, "rails", "rails/rails", "Ruby on Rails", "Ruby", 55900, 21500, 45),
    (458058, "bootstrap", "twbs/bootstrap", "The most popular HTML, CSS, and JavaScript framework for developing responsive, mobile first projects on the web.", "JavaScript", 170000, 78500, 123),
    (16563587, "express", "expressjs/express", "Fast, unopinionated, minimalist web framework for node.", "JavaScript", 65000, 15800, 87),
    (49609581, "laravel", "laravel/laravel", "Laravel is a web application framework with expressive, elegant syntax.", "PHP", 78100, 24000, 76),
    (24832401, "django", "django/django", "The Web framework for perfectionists with deadlines.", "Python", 79000, 31500, 112),
    (1863329, "spring-boot", "spring-projects/spring-boot", "Spring Boot", "Java", 74600, 40700, 89),
    (3544490, ".NET", "dotnet/core", ".NET is a cross-platform runtime for cloud, mobile, desktop, and IoT apps.", "C#", 21000, 4900, 65),
    (896335270, "rust", "rust-lang/rust", "Empowering everyone to build reliable and efficient software.", "Rust", 96800, 12500, 178),
    (31792824, "go", "golang/go", "The Go programming language", "Go", 123000, 17500, 145),
    (5470, "jquery", "jquery/jquery", "jQuery JavaScript Library", "JavaScript", 59100, 20600, 34),
    (943149, "lodash", "lodash/lodash", "A modern JavaScript utility library delivering modularity, performance, & extras.", "JavaScript", 59700, 7000, 42),
    (2126244, "moment", "moment/moment", "Parse, validate, manipulate, and display dates in javascript.", "JavaScript", 47900, 7200, 28),
    (588, "redux", "reduxjs/redux", "Predictable state container for JavaScript apps", "TypeScript", 60600, 15500, 56),
    (63537259, "tailwindcss", "tailwindlabs/tailwindcss", "A utility-first CSS framework for rapid UI development.", "JavaScript", 81900, 4100, 167),
    (18133, "webpack", "webpack/webpack", "A bundler for javascript and friends.", "JavaScript", 64500, 8800, 78),
    (65625612, "vite", "vitejs/vite", "Next generation frontend tooling. It is fast!", "TypeScript", 67600, 6100, 189),
    (209599, "homebrew-core", "Homebrew/homebrew-core", "Default formulae for the missing package manager for macOS (or Linux)", "Ruby", 13600, 12300, 23),
    (18159, "atom", "atom/atom", "The hackable text editor", "JavaScript", 60100, 17400, 12),
    (41881900, "vscode", "microsoft/vscode", "Visual Studio Code", "TypeScript", 163000, 28900, 245),
    (27804, "linux", "torvalds/linux", "Linux kernel source tree", "C", 179000, 53400, 289),
    (2325298, "git", "git/git", "Git Source Code Mirror", "C", 52000, 25400, 67),
    (83844720, "deno", "denoland/deno", "A modern runtime for JavaScript and TypeScript.", "Rust", 94800, 5200, 123),
    (23096959, "electron", "electron/electron", "Build cross-platform desktop apps with JavaScript, HTML, and CSS", "C++", 113000, 15200, 89),
    (50130219, "flutter", "flutter/flutter", "Flutter makes it easy and fast to build beautiful apps for mobile and beyond", "Dart", 165000, 27200, 198),
    (44409029, "react-native", "facebook/react-native", "A framework for building native applications using React", "C++", 118000, 24200, 134),
    (32553920, "ionic-framework", "ionic-team/ionic-framework", "A powerful cross-platform UI toolkit for building native-quality iOS, Android, and Progressive Web Apps with HTML, CSS, and JavaScript.", "TypeScript", 51000, 13600, 45),
    (16563, "node", "nodejs/node", "Node.js JavaScript runtime", "JavaScript", 106000, 29000, 156),
    (3687540, "yarn", "yarnpkg/yarn", "The 1.x line is frozen - features and bugfixes now happen on https://github.com/yarnpkg/berry", "JavaScript", 41500, 2800, 23),
    (19816070, "npm", "npm/cli", "the package manager for JavaScript", "JavaScript", 8400, 3100, 34),
    (3687541, "babel", "babel/babel", "Babel is a compiler for writing next generation JavaScript.", "TypeScript", 43200, 5600, 67),
    (4687843, "eslint", "eslint/eslint", "Find and fix problems in your JavaScript code.", "JavaScript", 24900, 4500, 45),
    (68672648, "prettier", "prettier/prettier", "Prettier is an opinionated code formatter.", "JavaScript", 49200, 4300, 78),
    (123456789, "mongodb", "mongodb/mongo", "The MongoDB Database", "C++", 26100, 5700, 89),
    (234567890, "postgres", "postgres/postgres", "Mirror of the official PostgreSQL GIT repository.", "C", 15800, 4600, 67),
    (345678901, "redis", "redis/redis", "Redis is an in-memory database that persists on disk.", "C", 66100, 23800, 123),
    (456789012, "mysql-server", "mysql/mysql-server", "MySQL Server, the worlds most popular open source database.", "C++", 10900, 2100, 45),
    (567890123, "graphql", "graphql/graphql-js", "A reference implementation of GraphQL for JavaScript", "JavaScript", 20100, 2000, 56),
    (678901234, "apollo-server", "apollographql/apollo-server", "GraphQL server for Express, Connect, Hapi, Koa and more", "TypeScript", 13800, 2000, 34),
    (789012345, "prisma", "prisma/prisma", "Next-generation ORM for Node.js & TypeScript | PostgreSQL, MySQL, MariaDB, SQL Server, SQLite, MongoDB and CockroachDB", "TypeScript", 39200, 1500, 167),
    (890123456, "strapi", "strapi/strapi", "The leading open-source headless CMS.", "JavaScript", 63000, 7900, 134),
    (901234567, "firebase-tools", "firebase/firebase-tools", "The Firebase Command Line Tools", "TypeScript", 4000, 930, 23),
    (912345678, "supabase", "supabase/supabase", "The open source Firebase alternative.", "TypeScript", 71400, 6900, 234),
]

WEEKLY_ACTIVITY = WeeklyActivity(
    labels=["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
    datasets=[
        ActivityDataset(
            label="Repository Activity",
            data=[2100, 2800, 3200, 2950, 3800, 3400, 4200],
            border_color="#8B5CF6",
            background_color="rgba(139, 92, 246, 0.1)",
        ),
        ActivityDataset(
            label="User Registrations",
            data=[1800, 2200, 2700, 2400, 3100, 2900, 3600],
            border_color="#10B981",
            background_color="rgba(16, 185, 129, 0.1)",
        ),
    ],
)


def load_seed_data(store: MemoryStore) -> None:
    """Populates an empty store with the dashboard's initial data set."""
    for metric in DEFAULT_METRICS:
        store.upsert_dashboard_metric(DashboardMetricUpsert(**metric))

    for technology in DEFAULT_TECHNOLOGIES:
        store.upsert_technology(TechnologyUpsert(**technology))

    for profile in DEFAULT_PROFILES:
        store.upsert_github_profile(GithubProfileUpsert(**profile))

    for github_id, name, full_name, description, language, stars, forks, today_stars in DEFAULT_REPOSITORIES:
        store.upsert_repository(RepositoryUpsert(
            github_id=github_id,
            name=name,
            full_name=full_name,
            description=description,
            owner=full_name.split("/")[0],
            language=language,
            stars=stars,
            forks=forks,
            today_stars=today_stars,
            growth_percentage=format_growth(today_stars, stars),
            url=f"https://github.com/{full_name}",
        ))

    logger.info(
        f"Seeded store with {len(DEFAULT_METRICS)} metrics, {len(DEFAULT_TECHNOLOGIES)} technologies, "
        f"{len(DEFAULT_PROFILES)} profiles and {len(DEFAULT_REPOSITORIES)} repositories."
    )
