from __future__ import annotations

from feeds.base import StaticFeed
from feeds.registry import register


class PeopleToFollowFeed(StaticFeed):
    feed_name = "people_to_follow"
    category = "networking"
    ITEMS = [
        {
            "id": "p1",
            "name": "David Chen",
            "position": "Product Director at InnovateTech",
            "connection": "500+ mutual connections",
            "imageUrl": "https://randomuser.me/api/portraits/men/32.jpg",
        },
        {
            "id": "p2",
            "name": "Sarah Johnson",
            "position": "VP of Product at TechSolutions",
            "connection": "Shared alma mater: Stanford",
            "imageUrl": "https://randomuser.me/api/portraits/women/44.jpg",
        },
        {
            "id": "p3",
            "name": "Michael Torres",
            "position": "Chief Product Officer at SaaS Global",
            "connection": "Product Management expert",
            "imageUrl": "https://randomuser.me/api/portraits/men/67.jpg",
        },
        {
            "id": "p4",
            "name": "Jennifer Wilson",
            "position": "Senior UX Designer at DesignFirst",
            "connection": "Mutual interest in UX Design",
            "imageUrl": "https://randomuser.me/api/portraits/women/17.jpg",
        },
        {
            "id": "p5",
            "name": "Robert Kim",
            "position": "Head of Product Innovation at TechCorp",
            "connection": "Same industry",
            "imageUrl": "https://randomuser.me/api/portraits/men/22.jpg",
        },
    ]


class PeopleToConnectFeed(StaticFeed):
    feed_name = "people_to_connect"
    category = "networking"
    ITEMS = [
        {
            "id": "c1",
            "name": "James Wilson",
            "position": "Engineering Manager at TechCorp",
            "connection": "Works at your company",
            "imageUrl": "https://randomuser.me/api/portraits/men/52.jpg",
        },
        {
            "id": "c2",
            "name": "Alex Rodriguez",
            "position": "Product Manager at InnoTech",
            "connection": "Similar background",
            "imageUrl": "https://randomuser.me/api/portraits/men/91.jpg",
        },
        {
            "id": "c3",
            "name": "Emily Chang",
            "position": "UX Director at DesignHub",
            "connection": "Relevant to your interests",
            "imageUrl": "https://randomuser.me/api/portraits/women/33.jpg",
        },
        {
            "id": "c4",
            "name": "Thomas Wright",
            "position": "Technical Lead at DataSystems",
            "connection": "Alumni connection",
            "imageUrl": "https://randomuser.me/api/portraits/men/41.jpg",
        },
        {
            "id": "c5",
            "name": "Sophia Martinez",
            "position": "Growth Strategist at MarketBoost",
            "connection": "Recommended by your network",
            "imageUrl": "https://randomuser.me/api/portraits/women/28.jpg",
        },
    ]


class TrendingPostsFeed(StaticFeed):
    feed_name = "trending_posts"
    category = "networking"
    ITEMS = [
        {
            "id": "post1",
            "author": "Rachel Kim",
            "position": "Director of Product Strategy",
            "timePosted": "2d",
            "content": (
                "The future of product management is becoming increasingly data-driven. "
                "Here are 5 key metrics every PM should track to make better decisions..."
            ),
            "reactions": "1,245",
            "comments": "83",
            "authorImage": "https://randomuser.me/api/portraits/women/56.jpg",
        },
        {
            "id": "post2",
            "author": "Mark Jensen",
            "position": "Chief Innovation Officer",
            "timePosted": "1d",
            "content": (
                "Excited to announce our new AI-powered product suite that's transforming how teams "
                "collaborate across time zones. #ProductInnovation #AITools"
            ),
            "reactions": "3,872",
            "comments": "256",
            "authorImage": "https://randomuser.me/api/portraits/men/76.jpg",
        },
        {
            "id": "post3",
            "author": "Vanessa Wu",
            "position": "Product Lead at TechGrowth",
            "timePosted": "3d",
            "content": (
                "User research is not just about validating your ideas. It's about discovering what "
                "you don't know you don't know. #UXResearch #ProductDevelopment"
            ),
            "reactions": "928",
            "comments": "71",
            "authorImage": "https://randomuser.me/api/portraits/women/60.jpg",
        },
        {
            "id": "post4",
            "author": "Jason Mitchell",
            "position": "VP Engineering at CloudScale",
            "timePosted": "5h",
            "content": (
                "Just published: '5 Microservices Patterns That Scale'. Link in comments. "
                "Would love your feedback! #Engineering #Microservices"
            ),
            "reactions": "562",
            "comments": "47",
            "authorImage": "https://randomuser.me/api/portraits/men/82.jpg",
        },
        {
            "id": "post5",
            "author": "Priya Sharma",
            "position": "Data Science Manager",
            "timePosted": "1d",
            "content": (
                "The gap between data science and product is closing. Here's how we're embedding ML "
                "capabilities directly into our product development lifecycle..."
            ),
            "reactions": "1,105",
            "comments": "93",
            "authorImage": "https://randomuser.me/api/portraits/women/74.jpg",
        },
    ]


def _register():
    for feed in (PeopleToFollowFeed, PeopleToConnectFeed, TrendingPostsFeed):
        register(feed.feed_name, feed)


_register()
