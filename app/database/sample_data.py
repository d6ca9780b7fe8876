# Sample catalog content loaded by `python main.py seed`
from datetime import datetime, timezone

sample_destinations = [
    {
        "name": "Bali",
        "country": "Indonesia",
        "region": "Asia",
        "description": "Tropical paradise with stunning beaches, ancient temples, and vibrant culture. Experience the perfect blend of relaxation and adventure in this Indonesian gem.",
        "images": [
            "https://images.unsplash.com/photo-1544367567-0f2fcb009e0b",
            "https://images.unsplash.com/photo-1518548419970-58e3b4079ab2",
        ],
        "highlights": ["Beautiful beaches", "Ancient temples", "Rice terraces", "Vibrant nightlife", "Traditional arts"],
        "bestTimeToVisit": "April to October",
        "averageRating": 4.8,
        "reviewCount": 1250,
        "startingPrice": 899,
        "currency": "USD",
        "tags": ["beach", "culture", "adventure", "tropical", "temples"],
        "coordinates": {"lat": -8.3405, "lng": 115.092},
        "featured": True,
        "isActive": True,
    },
    {
        "name": "Santorini",
        "country": "Greece",
        "region": "Europe",
        "description": "Iconic Greek island with whitewashed buildings and breathtaking sunsets. Famous for its volcanic beaches, stunning architecture, and romantic atmosphere.",
        "images": [
            "https://images.unsplash.com/photo-1570077188670-e3a8d69ac5ff",
            "https://images.unsplash.com/photo-1613395877344-13d4a8e0d49e",
        ],
        "highlights": ["Stunning sunsets", "White architecture", "Wine tasting", "Volcanic beaches", "Luxury resorts"],
        "bestTimeToVisit": "May to September",
        "averageRating": 4.9,
        "reviewCount": 980,
        "startingPrice": 1299,
        "currency": "USD",
        "tags": ["romance", "island", "culture", "photography", "wine"],
        "coordinates": {"lat": 36.3932, "lng": 25.4615},
        "featured": True,
        "isActive": True,
    },
    {
        "name": "Kyoto",
        "country": "Japan",
        "region": "Asia",
        "description": "Ancient capital of Japan with thousands of temples, traditional gardens, and geisha districts. A perfect blend of history and modern culture.",
        "images": ["https://images.unsplash.com/photo-1493976040374-85c8e12f0c0e"],
        "highlights": ["Historic temples", "Traditional gardens", "Geisha districts", "Bamboo forest"],
        "bestTimeToVisit": "March to May, September to November",
        "averageRating": 4.7,
        "reviewCount": 1450,
        "startingPrice": 1199,
        "currency": "USD",
        "tags": ["culture", "history", "temples", "gardens", "traditional"],
        "coordinates": {"lat": 35.0116, "lng": 135.7681},
        "featured": False,
        "isActive": True,
    },
    {
        "name": "Machu Picchu",
        "country": "Peru",
        "region": "South America",
        "description": "Ancient Incan citadel set high in the Andes Mountains. One of the most iconic archaeological sites in the world.",
        "images": ["https://images.unsplash.com/photo-1587595431973-160d0d94add1"],
        "highlights": ["Inca ruins", "Mountain views", "Inca Trail", "Sacred Valley"],
        "bestTimeToVisit": "May to September",
        "averageRating": 4.9,
        "reviewCount": 2100,
        "startingPrice": 1599,
        "currency": "USD",
        "tags": ["adventure", "history", "hiking", "mountains", "archaeology"],
        "coordinates": {"lat": -13.1631, "lng": -72.545},
        "featured": True,
        "isActive": True,
    },
]

sample_packages = [
    {
        "title": "Magical Bali Adventure",
        "destination": "Bali",
        "duration": "7 Days / 6 Nights",
        "price": 899,
        "originalPrice": 1199,
        "currency": "USD",
        "images": ["https://images.unsplash.com/photo-1537953773345-d172ccf13cf1"],
        "description": "Experience the magic of Bali with our comprehensive tour package including cultural tours, beach activities, and temple visits.",
        "highlights": ["Ubud Rice Terraces", "Temple Tours", "Beach Activities", "Cultural Shows"],
        "inclusions": ["Accommodation", "Daily Breakfast", "Airport Transfers", "Guided Tours"],
        "exclusions": ["International Flights", "Personal Expenses", "Travel Insurance"],
        "itinerary": [
            {
                "day": 1,
                "title": "Arrival in Bali",
                "description": "Airport pickup and hotel check-in",
                "activities": ["Airport transfer", "Hotel check-in", "Welcome dinner"],
                "meals": ["Dinner"],
            },
            {
                "day": 2,
                "title": "Ubud Cultural Tour",
                "description": "Explore the cultural heart of Bali",
                "activities": ["Rice terrace visit", "Temple tour", "Art market shopping"],
                "meals": ["Breakfast", "Lunch"],
                "accommodation": "Ubud Resort",
            },
        ],
        "difficulty": "Easy",
        "groupSize": {"min": 2, "max": 15},
        "departureDate": "2025-03-15",
        "availableDates": ["2025-03-15", "2025-04-01", "2025-04-15"],
        "category": "Cultural",
        "rating": 4.8,
        "reviewCount": 156,
        "featured": True,
    },
    {
        "title": "Santorini Romantic Getaway",
        "destination": "Santorini",
        "duration": "5 Days / 4 Nights",
        "price": 1299,
        "currency": "USD",
        "images": ["https://images.unsplash.com/photo-1570077188670-e3a8d69ac5ff"],
        "description": "Perfect romantic escape to the beautiful island of Santorini with stunning sunsets and luxury accommodation.",
        "highlights": ["Sunset viewing", "Wine tasting", "Private tours", "Luxury accommodation"],
        "inclusions": ["5-star accommodation", "Daily breakfast", "Wine tours", "Sunset cruise"],
        "exclusions": ["International flights", "Lunches and dinners", "Personal expenses"],
        "itinerary": [
            {
                "day": 1,
                "title": "Arrival and Oia Exploration",
                "description": "Arrive and explore the famous Oia village",
                "activities": ["Airport transfer", "Oia village tour", "Sunset viewing"],
                "meals": ["Dinner"],
            },
        ],
        "difficulty": "Easy",
        "groupSize": {"min": 2, "max": 8},
        "departureDate": "2025-05-01",
        "availableDates": ["2025-05-01", "2025-06-01", "2025-07-01"],
        "category": "Honeymoon",
        "rating": 4.9,
        "reviewCount": 89,
        "featured": True,
    },
    {
        "title": "Inca Trail Trek",
        "destination": "Machu Picchu",
        "duration": "4 Days / 3 Nights",
        "price": 1599,
        "currency": "USD",
        "images": ["https://images.unsplash.com/photo-1587595431973-160d0d94add1"],
        "description": "Hike the classic Inca Trail through cloud forest and mountain passes to reach Machu Picchu at sunrise.",
        "highlights": ["Classic Inca Trail", "Sun Gate sunrise", "Guided citadel tour"],
        "inclusions": ["Permits", "Camping equipment", "Porters", "Meals on the trail"],
        "exclusions": ["Sleeping bag", "Tips"],
        "itinerary": [],
        "difficulty": "Challenging",
        "groupSize": {"min": 4, "max": 12},
        "departureDate": "2025-06-10",
        "availableDates": ["2025-06-10", "2025-07-08"],
        "category": "Adventure",
        "rating": 4.7,
        "reviewCount": 64,
        "featured": False,
    },
]

sample_blog_posts = [
    {
        "title": "10 Hidden Gems in Southeast Asia",
        "slug": "10-hidden-gems-in-southeast-asia",
        "excerpt": "Discover breathtaking destinations that most tourists never see.",
        "content": "Southeast Asia is full of places that stay off the usual itinerary...",
        "author": {
            "name": "Sarah Johnson",
            "avatar": "/images/authors/sarah.jpg",
            "bio": "Travel writer and photographer exploring Asia for a decade.",
        },
        "publishedAt": datetime(2024, 1, 15, tzinfo=timezone.utc),
        "readTime": 8,
        "category": "Destinations",
        "tags": ["asia", "hidden gems", "adventure"],
        "featuredImage": "/images/blog/southeast-asia.jpg",
        "images": [],
        "seo": {
            "metaTitle": "10 Hidden Gems in Southeast Asia",
            "metaDescription": "Breathtaking Southeast Asian destinations most tourists never see.",
            "keywords": ["southeast asia", "hidden gems", "travel"],
        },
        "featured": True,
        "isActive": True,
        "viewCount": 0,
        "likesCount": 0,
    },
    {
        "title": "Budget Travel Tips for Europe",
        "slug": "budget-travel-tips-for-europe",
        "excerpt": "How to see the best of Europe without breaking the bank.",
        "content": "Rail passes, shoulder seasons and city cards go a long way...",
        "author": {
            "name": "Mike Chen",
            "avatar": "/images/authors/mike.jpg",
            "bio": "Backpacker and budget travel specialist.",
        },
        "publishedAt": datetime(2024, 2, 3, tzinfo=timezone.utc),
        "readTime": 6,
        "category": "Budget Travel",
        "tags": ["europe", "budget", "tips"],
        "featuredImage": "/images/blog/europe-budget.jpg",
        "images": [],
        "seo": {
            "metaTitle": "Budget Travel Tips for Europe",
            "metaDescription": "See the best of Europe on a budget with these practical tips.",
            "keywords": ["europe", "budget travel"],
        },
        "featured": False,
        "isActive": True,
        "viewCount": 0,
        "likesCount": 0,
    },
]
