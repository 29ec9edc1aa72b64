from __future__ import annotations

from typing import Any

SAMPLE_ORGANIZATION_ID = "org-1"

# days_from_now is resolved against the seeding date
SAMPLE_EVENTS: list[dict[str, Any]] = [
    {
        "title": "Beach Cleanup - Ocean Park",
        "description": (
            "Join us for a community beach cleanup event. Help keep our beaches "
            "clean and protect marine life. All equipment will be provided."
        ),
        "days_from_now": 3,
        "time": "10:00:00",
        "location": "Ocean Park Beach, Main Entrance",
        "category": "Environment",
        "volunteers_needed": 20,
        "organization_contact": "beachcleanup@example.org",
        "image_url": "https://images.unsplash.com/photo-1618477461853-cf6ed80faba5?q=80&w=1000",
        "requirements": "Wear comfortable clothes and shoes. Sunscreen recommended.",
    },
    {
        "title": "Senior Center Tech Help",
        "description": (
            "Teach basic computer and smartphone skills to seniors at our local "
            "senior center. Patience and good communication skills required."
        ),
        "days_from_now": 5,
        "time": "14:00:00",
        "location": "Sunny Days Senior Center, 789 Oak St",
        "category": "Elderly Care",
        "volunteers_needed": 8,
        "organization_contact": "seniors@example.org",
        "image_url": None,
        "requirements": "Basic tech knowledge required.",
    },
    {
        "title": "Food Drive for Local Shelter",
        "description": (
            "Help us collect and sort food donations for our local homeless shelter. "
            "We need volunteers to receive, sort, and pack food items for distribution."
        ),
        "days_from_now": 7,
        "time": "09:30:00",
        "location": "Community Center, 123 Main St",
        "category": "Homelessness",
        "volunteers_needed": 15,
        "organization_contact": "fooddrive@example.org",
        "image_url": "https://images.unsplash.com/photo-1593113598332-cd59a0c3a9a1?q=80&w=1000",
        "requirements": "No special requirements. Training will be provided on site.",
    },
    {
        "title": "Animal Shelter Care Day",
        "description": (
            "Spend time with shelter animals and help with cleaning, feeding, and "
            "socializing. A great opportunity for animal lovers to make a difference."
        ),
        "days_from_now": 10,
        "time": "13:00:00",
        "location": "Happy Paws Animal Shelter, 456 Park Ave",
        "category": "Animal Welfare",
        "volunteers_needed": 12,
        "organization_contact": "animals@example.org",
        "image_url": "https://images.unsplash.com/photo-1593871075120-982e042088d8?q=80&w=1000",
        "requirements": "Must be comfortable around animals. Minimum age: 16 years.",
    },
    {
        "title": "After-School Reading Buddies",
        "description": "Read with elementary students and help them build literacy skills.",
        "days_from_now": 12,
        "time": "15:30:00",
        "location": "Maple Elementary Library",
        "category": "Education",
        "volunteers_needed": 10,
        "organization_contact": "reading@example.org",
        "image_url": None,
        "requirements": "Background check required.",
    },
    {
        "title": "Park Restoration Project",
        "description": (
            "Help us restore and beautify our local park. Activities include planting "
            "flowers, painting benches, and general cleanup. Family-friendly."
        ),
        "days_from_now": 14,
        "time": "11:00:00",
        "location": "Greenfield Park, West Entrance",
        "category": None,
        "volunteers_needed": 25,
        "organization_contact": "parks@example.org",
        "image_url": "https://images.unsplash.com/photo-1503754163129-a02a0c646fba?q=80&w=1000",
        "requirements": "Bring gardening gloves if possible. Tools will be provided.",
    },
    {
        "title": "Winter Coat Collection",
        "description": "Sort and hand out donated coats and jackets to families in need.",
        "days_from_now": 18,
        "time": "10:00:00",
        "location": "Riverside Church Hall",
        "category": "Clothing Donation",
        "volunteers_needed": 6,
        "organization_contact": "coats@example.org",
        "image_url": None,
        "requirements": None,
    },
    {
        "title": "Community Blood Drive",
        "description": "Greet donors, manage check-in and hand out snacks at the clinic.",
        "days_from_now": 21,
        "time": "08:00:00",
        "location": "Westside Clinic",
        "category": "Health",
        "volunteers_needed": 9,
        "organization_contact": "blood@example.org",
        "image_url": None,
        "requirements": "Must be 18 or older.",
    },
]
