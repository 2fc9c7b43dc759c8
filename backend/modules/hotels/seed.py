"""
Sample hotels used to populate an empty database.
"""

SEED_OWNER_ID = "507f1f77bcf86cd799439011"


def _hotel(
    name: str,
    city: str,
    address: str,
    description: str,
    price: float,
    star_rating: int,
    amenities: list[str],
) -> dict:
    return {
        "name": name,
        "city": city,
        "address": address,
        "description": description,
        "price": price,
        "star_rating": star_rating,
        "amenities": amenities,
        "images": [],
        "owner": SEED_OWNER_ID,
    }


SAMPLE_HOTELS: list[dict] = [
    _hotel(
        "Hotel Marine Plaza", "Mumbai", "Marine Drive, Mumbai 400020",
        "Elegant hotel overlooking Marine Drive with modern amenities and stunning sea views.",
        2500, 4, ["Free WiFi", "Restaurant", "Room Service", "AC"],
    ),
    _hotel(
        "Hotel Suba Palace", "Mumbai", "Colaba, Mumbai 400005",
        "Comfortable stay near Gateway of India, perfect for budget travelers.",
        1800, 3, ["Free WiFi", "Restaurant", "AC"],
    ),
    _hotel(
        "Hotel Godwin", "Mumbai", "Garden Road, Colaba, Mumbai 400001",
        "Budget hotel with great location near tourist attractions.",
        1500, 3, ["Free WiFi", "AC", "Room Service"],
    ),
    _hotel(
        "Hotel Broadway", "Delhi", "Asaf Ali Road, New Delhi 110002",
        "Heritage hotel near Old Delhi with vintage charm.",
        2200, 4, ["Free WiFi", "Restaurant", "AC", "Room Service"],
    ),
    _hotel(
        "Hotel Le Roi", "Delhi", "Paharganj, New Delhi 110055",
        "Budget hotel in backpacker area with basic amenities.",
        1200, 2, ["Free WiFi", "AC"],
    ),
    _hotel(
        "Hotel Shelton", "Delhi", "Connaught Place, New Delhi 110001",
        "Central location with easy access to metro and shopping.",
        2800, 4, ["Free WiFi", "Restaurant", "AC", "Room Service"],
    ),
    _hotel(
        "Hotel Empire", "Bangalore", "Church Street, Bangalore 560001",
        "Centrally located hotel near MG Road metro station.",
        2400, 4, ["Free WiFi", "Restaurant", "AC", "Room Service"],
    ),
    _hotel(
        "Hotel Nandhana Grand", "Bangalore", "Koramangala, Bangalore 560034",
        "IT hub proximity with modern amenities.",
        1800, 3, ["Free WiFi", "Restaurant", "AC"],
    ),
    _hotel(
        "Hotel Royal Orchid", "Bangalore", "Brigade Road, Bangalore 560025",
        "Shopping district hotel with excellent service.",
        3000, 4, ["Free WiFi", "Restaurant", "Bar", "AC", "Gym"],
    ),
    _hotel(
        "Beach Paradise Resort", "Goa", "Calangute Beach, Goa 403516",
        "Beachfront resort with stunning ocean views and water sports.",
        3500, 4, ["Free WiFi", "Restaurant", "Beach Access", "AC", "Pool"],
    ),
    _hotel(
        "Hotel Marbella Guest House", "Goa", "Panjim, Goa 403001",
        "Cozy guest house in capital city with Portuguese charm.",
        1800, 3, ["Free WiFi", "AC"],
    ),
    _hotel(
        "Hotel Beira Mar", "Goa", "Baga Beach, Goa 403516",
        "Party area hotel with nightlife proximity.",
        2200, 3, ["Free WiFi", "Restaurant", "AC", "Beach Access"],
    ),
    _hotel(
        "Hotel Pearl Palace", "Jaipur", "Hari Kishan Somani Marg, Jaipur 302001",
        "Heritage hotel with traditional Rajasthani hospitality.",
        2000, 4, ["Free WiFi", "Restaurant", "AC", "Rooftop Cafe"],
    ),
    _hotel(
        "Hotel Arya Niwas", "Jaipur", "Sansar Chandra Road, Jaipur 302001",
        "Budget hotel near railway station with vegetarian restaurant.",
        1500, 3, ["Free WiFi", "Restaurant", "AC"],
    ),
    _hotel(
        "Hotel Diggi Palace", "Jaipur", "SMS Hospital Road, Jaipur 302004",
        "Palace hotel with beautiful gardens and cultural events.",
        2800, 4, ["Free WiFi", "Restaurant", "AC", "Garden"],
    ),
]
