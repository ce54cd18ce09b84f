from ingest_articles.models import Category, FeedSource

RSS_SOURCES = [
    # World
    FeedSource("BBC World", "https://feeds.bbci.co.uk/news/world/rss.xml", Category.WORLD, "high"),
    FeedSource("The Guardian World", "https://www.theguardian.com/world/rss", Category.WORLD, "high"),
    # Politics
    FeedSource("NY Times US", "https://rss.nytimes.com/services/xml/rss/nyt/US.xml", Category.POLITICS, "high"),
    FeedSource(
        "Washington Post Politics",
        "https://www.washingtonpost.com/arcio/rss/category/politics/?itid=lk_inline_manual_2",
        Category.POLITICS,
        "high",
    ),
    FeedSource("The Nation", "https://www.thenation.com/subject/politics/feed/", Category.POLITICS, "high"),
    FeedSource("Rolling Stone Politics", "https://www.rollingstone.com/politics/feed/", Category.POLITICS, "high"),
    # Tech
    FeedSource("TechCrunch", "https://techcrunch.com/feed/", Category.TECH, "high"),
    FeedSource("The Verge", "https://www.theverge.com/rss/index.xml", Category.TECH, "high"),
    # Business
    FeedSource("CNBC Business", "https://www.cnbc.com/id/100003114/device/rss/rss.html", Category.BUSINESS, "high"),
    FeedSource("Bloomberg Markets", "https://feeds.bloomberg.com/markets/news.rss", Category.BUSINESS, "high"),
    # Science
    FeedSource("Science Daily", "https://www.sciencedaily.com/rss/top/science.xml", Category.SCIENCE),
    # Sports
    FeedSource("ESPN", "https://www.espn.com/espn/rss/news", Category.SPORTS),
]

SOURCES_BY_NAME = {source.name: source for source in RSS_SOURCES}
