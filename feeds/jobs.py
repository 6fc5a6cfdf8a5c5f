from __future__ import annotations

from feeds.base import StaticFeed
from feeds.registry import register


class JobOpeningsFeed(StaticFeed):
    feed_name = "job_openings"
    category = "jobs"
    ITEMS = [
        {
            "id": "job1",
            "title": "Senior Product Manager",
            "company": "Google",
            "location": "Mountain View, CA (Hybrid)",
            "timePosted": "2 days ago",
            "applicants": "78",
            "salaryRange": "$140K - $180K",
            "matchPercentage": "95",
            "logoUrl": "https://logo.clearbit.com/google.com",
        },
        {
            "id": "job2",
            "title": "Product Manager, AI Solutions",
            "company": "Salesforce",
            "location": "San Francisco, CA (On-site)",
            "timePosted": "5 days ago",
            "applicants": "125",
            "salaryRange": "$130K - $160K",
            "matchPercentage": "88",
            "logoUrl": "https://logo.clearbit.com/salesforce.com",
        },
        {
            "id": "job3",
            "title": "Senior Product Manager, Growth",
            "company": "Airbnb",
            "location": "Remote (US)",
            "timePosted": "1 day ago",
            "applicants": "43",
            "salaryRange": "$150K - $190K",
            "matchPercentage": "92",
            "logoUrl": "https://logo.clearbit.com/airbnb.com",
        },
        {
            "id": "job4",
            "title": "Product Manager - Machine Learning",
            "company": "Microsoft",
            "location": "Redmond, WA (Hybrid)",
            "timePosted": "3 days ago",
            "applicants": "89",
            "salaryRange": "$145K - $175K",
            "matchPercentage": "85",
            "logoUrl": "https://logo.clearbit.com/microsoft.com",
        },
        {
            "id": "job5",
            "title": "Director of Product Management",
            "company": "Netflix",
            "location": "Los Angeles, CA (Flexible)",
            "timePosted": "4 days ago",
            "applicants": "62",
            "salaryRange": "$180K - $220K",
            "matchPercentage": "80",
            "logoUrl": "https://logo.clearbit.com/netflix.com",
        },
    ]


class RecommendedCoursesFeed(StaticFeed):
    feed_name = "recommended_courses"
    category = "jobs"
    ITEMS = [
        {
            "id": "course1",
            "title": "Advanced Product Management: Strategy to Execution",
            "provider": "LinkedIn Learning",
            "rating": 4.5,
            "reviewCount": "1,245",
            "imageUrl": "https://images.unsplash.com/photo-1516321318423-f06f85e504b3?fit=crop&w=500&h=200",
        },
        {
            "id": "course2",
            "title": "Data-Driven Product Decisions",
            "provider": "Coursera",
            "rating": 4.0,
            "reviewCount": "843",
            "imageUrl": "https://images.unsplash.com/photo-1553877522-43269d4ea984?fit=crop&w=500&h=200",
        },
        {
            "id": "course3",
            "title": "AI for Product Managers",
            "provider": "Udemy",
            "rating": 5.0,
            "reviewCount": "2,156",
            "imageUrl": "https://images.unsplash.com/photo-1517245386807-bb43f82c33c4?fit=crop&w=500&h=200",
        },
        {
            "id": "course4",
            "title": "UX Research Fundamentals",
            "provider": "edX",
            "rating": 4.3,
            "reviewCount": "976",
            "imageUrl": "https://images.unsplash.com/photo-1542744173-8e7e53415bb0?fit=crop&w=500&h=200",
        },
        {
            "id": "course5",
            "title": "Product Analytics and Growth Metrics",
            "provider": "Coursera",
            "rating": 4.7,
            "reviewCount": "1,532",
            "imageUrl": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?fit=crop&w=500&h=200",
        },
    ]


class SkillsToDevelopFeed(StaticFeed):
    feed_name = "skills_to_develop"
    category = "jobs"
    ITEMS = [
        {
            "id": "skill1",
            "name": "AI & Machine Learning",
            "badge": "High Demand",
            "description": "Understanding AI fundamentals and applications is becoming essential for product managers in tech.",
            "advantage": "+35% job opportunities with this skill",
        },
        {
            "id": "skill2",
            "name": "Data Analytics",
            "badge": "Trending",
            "description": "Strengthen your ability to make data-driven decisions and derive insights from complex datasets.",
            "advantage": "+28% higher salary with this skill",
        },
        {
            "id": "skill3",
            "name": "Product Strategy",
            "badge": "Essential",
            "description": "Develop advanced strategic thinking to position products for sustainable growth and market leadership.",
            "advantage": "Required for 85% of senior PM roles",
        },
        {
            "id": "skill4",
            "name": "UX Design Principles",
            "badge": "Valuable",
            "description": "Learn to collaborate effectively with designers and understand user-centered design principles.",
            "advantage": "+22% more interview calls with this skill",
        },
        {
            "id": "skill5",
            "name": "Agile Leadership",
            "badge": "In Demand",
            "description": "Master leading agile teams and implementing agile methodologies across diverse product functions.",
            "advantage": "Listed in 74% of product leadership roles",
        },
    ]


def _register():
    for feed in (JobOpeningsFeed, RecommendedCoursesFeed, SkillsToDevelopFeed):
        register(feed.feed_name, feed)


_register()
