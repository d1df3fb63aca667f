# Sample catalog loaded into the store at startup.
# The frontend placeholders are served from the client's public folder.

PACKAGES = [
    {
        "title": "Kashi Allahabad Ayodhya Yatra",
        "duration": "3N/4D",
        "image": "/placeholder-package.jpg",
        "description": "Experience the spiritual essence of three holy cities - Kashi (Varanasi), Allahabad (Prayagraj), and Ayodhya.",
        "itinerary": [
            "Day 1: Arrival in Varanasi, Ganga Aarti",
            "Day 2: Varanasi temple tour and boat ride",
            "Day 3: Allahabad - Triveni Sangam visit",
            "Day 4: Ayodhya - Ram Janmabhoomi, return",
        ],
        "highlights": [
            "Ganga Aarti at Dashashwamedh Ghat",
            "Kashi Vishwanath Temple darshan",
            "Triveni Sangam in Allahabad",
            "Ram Janmabhoomi Temple visit",
        ],
        "price": 15000,
    },
    {
        "title": "Kashi Gaya Allahabad",
        "duration": "3N/4D",
        "image": "/placeholder-package.jpg",
        "description": "Visit the three most sacred cities for Hindu pilgrimage - Kashi, Gaya, and Allahabad.",
        "itinerary": [
            "Day 1: Arrival in Varanasi",
            "Day 2: Varanasi sightseeing",
            "Day 3: Travel to Gaya, Pinda Dhan rituals",
            "Day 4: Allahabad and return",
        ],
        "highlights": [
            "Kashi Vishwanath Temple",
            "Pinda Dhan in Gaya",
            "Triveni Sangam visit",
            "Boat ride on Ganges",
        ],
        "price": 16000,
    },
    {
        "title": "Kashi Nepal",
        "duration": "7N/8D",
        "image": "/placeholder-package.jpg",
        "description": "Extended spiritual journey covering Varanasi and sacred temples of Nepal.",
        "itinerary": [
            "Day 1-2: Varanasi exploration",
            "Day 3: Travel to Nepal",
            "Day 4-6: Kathmandu and Pashupatinath",
            "Day 7-8: Return journey",
        ],
        "highlights": [
            "Kashi temples and ghats",
            "Pashupatinath Temple Nepal",
            "Muktinath Darshan",
            "Kathmandu sightseeing",
        ],
        "price": 35000,
    },
]

TESTIMONIALS = [
    {
        "name": "Meghavarman King",
        "quote": "Really awesome! The way you treated and took kind way of talk all are very good and hotel stay is extraordinary and temple visit on time. Thank you a lot.",
        "image": "/placeholder-avatar.jpg",
    },
    {
        "name": "Manaswini Chowdary",
        "quote": "The best guide. I got the bliss of Kashi everywhere. Kashi is a lifetime experience we feel and I got it because of this tourist guide. Blessed!",
        "image": "/placeholder-avatar.jpg",
    },
    {
        "name": "Saravanan Shanmugam",
        "quote": "You people are awesome guys, especially Mr Prakash, who took care of my mom. No words to explain. We lived like a family for 4 days. Definitely I would refer to all. Thanks!",
        "image": "/placeholder-avatar.jpg",
    },
]

SERVICES = [
    {
        "title": "Cab Booking",
        "description": "Comfortable and reliable transportation services for your spiritual journey",
        "icon": "car",
    },
    {
        "title": "VIP Dharshan Booking",
        "description": "Skip the queues with our exclusive VIP darshan arrangements",
        "icon": "eye",
    },
    {
        "title": "Tour Escorts",
        "description": "Expert guides to enrich your spiritual experience with knowledge",
        "icon": "users",
    },
    {
        "title": "Boat Booking",
        "description": "Sacred boat rides on holy rivers for a divine experience",
        "icon": "ship",
    },
    {
        "title": "Pinda Dhan",
        "description": "Traditional ritual services performed with utmost devotion",
        "icon": "heart",
    },
]

GALLERY_SIZE = 16
GALLERY_DESTINATIONS = ["Kashi", "Varanasi", "Nepal", "Ayodhya", "Allahabad", "Gaya"]
GALLERY_CATEGORIES = ["Temples", "Ghats", "Rituals", "Buddhist"]


def gallery_items() -> list[dict]:
    """Gallery placeholders, cycling destinations and categories by index."""
    return [
        {
            "image": f"/placeholder-gallery-{i + 1}.jpg",
            "destination": GALLERY_DESTINATIONS[i % len(GALLERY_DESTINATIONS)],
            "category": GALLERY_CATEGORIES[i % len(GALLERY_CATEGORIES)],
        }
        for i in range(GALLERY_SIZE)
    ]
