_KERALA_ITINERARY = [
    {
        "day": 1,
        "title": "Arrival in Kochi",
        "description": "Meet the group at Ernakulam Junction, check in and walk through Fort Kochi at sunset.",
        "image": "/images/kerala/fort-kochi.jpg"
    },
    {
        "day": 2,
        "title": "Drive to Munnar",
        "description": "Climb into the Western Ghats, stopping at Cheeyappara and Valara waterfalls on the way.",
        "image": "/images/kerala/munnar-road.jpg"
    },
    {
        "day": 3,
        "title": "Tea Gardens & Eravikulam",
        "description": "Tea museum visit, Eravikulam National Park and an evening at Mattupetty Dam.",
        "image": "/images/kerala/tea-estate.jpg"
    },
    {
        "day": 4,
        "title": "Thekkady",
        "description": "Spice plantation walk and a Kathakali performance in the evening.",
        "image": "/images/kerala/thekkady.jpg"
    },
    {
        "day": 5,
        "title": "Alleppey Houseboat",
        "description": "Board a houseboat and cruise the backwaters, overnight on the water.",
        "image": "/images/kerala/houseboat.jpg"
    },
    {
        "day": 6,
        "title": "Varkala Cliffs",
        "description": "Beach time at Varkala and sunset from the north cliff.",
        "image": None
    },
    {
        "day": 7,
        "title": "Departure",
        "description": "Breakfast, check-out and drop at Kochi for the return journey.",
        "image": None
    }
]


KERALA_CALLING_DATA = {
    "id": "kerala-calling",
    "name": "Kerala Calling",
    "subtitle": "Venice of the East!",
    "category": "Beach",
    "base_price": 9999,
    "key_stats": {
        "duration": "7 days / 6 nights",
        "difficulty": "Easy",
        "age_group": "8-40 years",
        "max_altitude": "6,100 ft"
    },
    "long_description": (
        "Backwaters, misty tea estates and long beaches: a week across Kerala "
        "from the Fort Kochi waterfront to the cliffs of Varkala."
    ),
    "hero_image": "/images/kerala/hero.jpg",
    "inclusions": [
        "Train tickets in 3AC from the departure city",
        "Twin or triple sharing stays",
        "Breakfast and dinner",
        "One night on an Alleppey houseboat",
        "Trip captain throughout"
    ],
    "exclusions": [
        "Lunch and personal expenses",
        "Entry tickets to monuments and parks",
        "Anything not listed under inclusions"
    ],
    "attractions": [
        {"name": "Fort Kochi", "image": "/images/kerala/fort-kochi.jpg"},
        {"name": "Munnar Tea Gardens", "image": "/images/kerala/tea-estate.jpg"},
        {"name": "Alleppey Backwaters", "image": "/images/kerala/houseboat.jpg"},
        {"name": "Varkala Cliff", "image": None}
    ],
    "departure_cities": [
        {"name": "Ahmedabad", "image": "/images/cities/ahmedabad.jpg", "price": 15999, "duration": "9 days / 8 nights"},
        {"name": "Mumbai", "image": "/images/cities/mumbai.jpg", "price": 14499, "duration": "8 days / 7 nights"},
        {"name": "Kochi", "image": "/images/cities/kochi.jpg", "price": 9999, "duration": "7 days / 6 nights"}
    ],
    "packages": [
        {
            "id": "k1",
            "name": "3AC Train from Ahmedabad",
            "price": 15999,
            "duration": "9 days / 8 nights",
            "departure_city": "Ahmedabad",
            "available_dates": [
                "Sep 26 - Oct 3, 2025",
                "Oct 3 - Oct 10, 2025",
                "Oct 31 - Nov 7, 2025"
            ],
            "itinerary": _KERALA_ITINERARY
        },
        {
            "id": "k2",
            "name": "3AC Train from Mumbai",
            "price": 14499,
            "duration": "8 days / 7 nights",
            "departure_city": "Mumbai",
            "available_dates": [
                "Oct 10 - Oct 17, 2025",
                "Nov 14 - Nov 21, 2025",
                "Dec 19 - Dec 26, 2025"
            ],
            "itinerary": _KERALA_ITINERARY
        },
        {
            "id": "k3",
            "name": "Ex-Kochi Group Tour",
            "price": 9999,
            "duration": "7 days / 6 nights",
            "departure_city": "Kochi",
            "available_dates": [
                "Sep 27 - Oct 3, 2025",
                "Oct 18 - Oct 24, 2025",
                "TBD"
            ],
            "itinerary": _KERALA_ITINERARY
        }
    ]
}
