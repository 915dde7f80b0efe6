"""Sample article hierarchy for development databases.

Technology
├── Programming
│   ├── Web Development
│   │   └── Getting Started with React
│   └── Introduction to TypeScript
└── Database Design Basics

Seeding is idempotent: an entry whose slug already exists is left untouched
and reused as the parent of its children.
"""

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.entities import Article
from app.infrastructure.database.repositories import SQLAlchemyArticleRepository

logger = logging.getLogger(__name__)

# (slug, title, parent slug, content)
SAMPLE_ARTICLES: list[tuple[str, str, str | None, str]] = [
    (
        "technology",
        "Technology",
        None,
        "# Technology\n\nThis is the technology category containing various tech-related articles.",
    ),
    (
        "programming",
        "Programming",
        "technology",
        "# Programming\n\nThis is the programming category containing various programming-related articles.",
    ),
    (
        "web-development",
        "Web Development",
        "programming",
        "# Web Development\n\nThis is the web development category containing various "
        "web development-related articles.",
    ),
    (
        "getting-started-with-react",
        "Getting Started with React",
        "web-development",
        "# Getting Started with React\n\n"
        "React is a JavaScript library for building user interfaces.\n\n"
        "## Key Concepts\n\n"
        "- **Components**: The building blocks of React applications\n"
        "- **Props**: A way to pass data from parent to child components\n"
        "- **State**: A way to manage data that changes over time\n\n"
        "## Getting Started\n\n"
        "```bash\nnpx create-react-app my-app\ncd my-app\nnpm start\n```",
    ),
    (
        "introduction-to-typescript",
        "Introduction to TypeScript",
        "programming",
        "# Introduction to TypeScript\n\n"
        "TypeScript is a strongly typed programming language that builds on JavaScript.\n\n"
        "## Benefits of TypeScript\n\n"
        "- **Static Type Checking**: Catch errors at compile time\n"
        "- **Better IDE Support**: Enhanced autocomplete and refactoring\n\n"
        "```typescript\nlet message: string = \"Hello, TypeScript!\";\n```",
    ),
    (
        "database-design-basics",
        "Database Design Basics",
        "technology",
        "# Database Design Basics\n\n"
        "Good database design is crucial for building scalable and maintainable applications.\n\n"
        "### 1. Normalization\nOrganize data to eliminate redundancy.\n\n"
        "### 2. Primary Keys\nEvery table should have a primary key.\n\n"
        "### 3. Foreign Keys\nForeign keys maintain *referential integrity*.",
    ),
]


async def seed_sample_articles(session: AsyncSession) -> int:
    """Insert the missing sample articles. Returns the number created."""
    repository = SQLAlchemyArticleRepository(session)
    ids_by_slug: dict[str, str] = {}
    created = 0
    # One second apart: sibling order follows created_at
    base = datetime.now(timezone.utc) - timedelta(seconds=len(SAMPLE_ARTICLES))

    for offset, (slug, title, parent_slug, content) in enumerate(SAMPLE_ARTICLES):
        existing = await repository.get_by_slug(slug)
        if existing is not None:
            ids_by_slug[slug] = existing.id
            continue
        parent_id = ids_by_slug.get(parent_slug) if parent_slug else None
        article = await repository.create(
            Article(
                title=title,
                slug=slug,
                content=content,
                parent_id=parent_id,
                created_at=base + timedelta(seconds=offset),
                updated_at=base + timedelta(seconds=offset),
            )
        )
        ids_by_slug[slug] = article.id
        created += 1

    return created


async def seed_on_startup(session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Seed the sample hierarchy in its own transaction; failures are logged, not raised."""
    try:
        async with session_factory() as session:
            created = await seed_sample_articles(session)
            await session.commit()
        if created:
            logger.info("Seeded %d sample article(s)", created)
        else:
            logger.debug("Sample articles already present")
    except Exception as exc:
        logger.warning("Could not seed sample articles: %s", exc)
