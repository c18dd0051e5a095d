# Record in the first catalog schema: camelCase keys, compact date labels and
# no itinerary. The loader migrates it to the current schema.

MANALI_DATA = {
    "id": "1",
    "name": "Manali",
    "shortDescription": "A Himalayan resort town famed for its adventure sports.",
    "longDescription": (
        "Nestled in the mountains of the Indian state of Himachal Pradesh, "
        "Manali is a high-altitude Himalayan resort town..."
    ),
    "imageUrl": "https://images.unsplash.com/photo-1586622992373-69411786178d?q=80&w=2070&auto=format&fit=crop",
    "category": "Mountain",
    "bestTimeToVisit": "October to June",
    "thingsToDo": [
        "Solang Valley Skiing",
        "Trekking in Parvati Valley",
        "Visit Hadimba Temple",
        "River Rafting in Beas"
    ],
    "availableDates": ["Oct 5-12, 2025", "Nov 15-22, 2025", "Oct 10-17, 2025", "Nov 20-27, 2025"],
    "packages": [
        {
            "id": "m1",
            "name": "AC Sleeper Train to Manali",
            "price": 15500,
            "duration": "7 days / 6 nights",
            "departureCity": "Mumbai",
            "availableDates": ["Oct 5-12, 2025", "Nov 15-22, 2025"]
        },
        {
            "id": "m2",
            "name": "Non AC Sleeper Train to Manali",
            "price": 12800,
            "duration": "7 days / 6 nights",
            "departureCity": "Mumbai",
            "availableDates": ["Oct 5-12, 2025", "Nov 15-22, 2025"]
        },
        {
            "id": "m3",
            "name": "AC Bus from Ahmedabad",
            "price": 13500,
            "duration": "8 days / 7 nights",
            "departureCity": "Ahmedabad",
            "availableDates": ["Oct 10-17, 2025", "Nov 20-27, 2025"]
        }
    ]
}
