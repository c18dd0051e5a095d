# First catalog schema, see manali.py.

GOA_DATA = {
    "id": "2",
    "name": "Goa",
    "shortDescription": "Famous for its beaches, nightlife, and Portuguese culture.",
    "longDescription": "Goa is a state in western India with coastlines stretching along the Arabian Sea...",
    "imageUrl": "https://images.unsplash.com/photo-1560179407-9f0b83ba8b39?q=80&w=2070&auto=format&fit=crop",
    "category": "Beach",
    "bestTimeToVisit": "November to February",
    "thingsToDo": [
        "Relax at Baga Beach",
        "Explore Old Goa Churches",
        "Dudhsagar Falls",
        "Anjuna Flea Market"
    ],
    "availableDates": ["Nov 10-15, 2025", "Dec 20-25, 2025", "Nov 12-17, 2025", "Dec 22-27, 2025"],
    "packages": [
        {
            "id": "g1",
            "name": "Flight Package from Mumbai",
            "price": 18000,
            "duration": "5 days / 4 nights",
            "departureCity": "Mumbai",
            "availableDates": ["Nov 10-15, 2025", "Dec 20-25, 2025"]
        },
        {
            "id": "g2",
            "name": "AC Sleeper Train from Ahmedabad",
            "price": 14000,
            "duration": "6 days / 5 nights",
            "departureCity": "Ahmedabad",
            "availableDates": ["Nov 12-17, 2025", "Dec 22-27, 2025"]
        }
    ]
}
