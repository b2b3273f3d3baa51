"""Static catalogues shared by the experience pages and the property editor."""

EXPERIENCE_CATEGORIES = {
    "safari-escapes": {
        "name": "Safari Escapes",
        "description": "Wake to golden light across vast savannahs and the rhythm of the wild at your doorstep.",
        "image_section": "experience-safari",
    },
    "coastal-retreats": {
        "name": "Coastal Retreats",
        "description": "Along coastlines, we curate stays that blend barefoot luxury with timeless charm.",
        "image_section": "experience-coastal",
    },
    "mountain-and-cabin-getaways": {
        "name": "Mountain & Cabin Getaways",
        "description": "In the highlands and forests, find peace in simplicity.",
        "image_section": "experience-mountain",
    },
}

PROPERTY_TYPES = [
    "villa", "cabin", "lodge", "tent", "apartment", "house",
    "cottage", "bungalow", "treehouse", "yurt", "boat", "castle",
]

CANCELLATION_POLICIES = [
    {"value": "flexible", "label": "Flexible - Full refund 24 hours before check-in"},
    {"value": "moderate", "label": "Moderate - Full refund 5 days before check-in"},
    {"value": "strict", "label": "Strict - 50% refund up to 1 week before check-in"},
    {"value": "non-refundable", "label": "Non-refundable - No refunds"},
]

COMMON_AMENITIES = [
    {"name": "WiFi", "icon": "wifi"},
    {"name": "Pool", "icon": "pool"},
    {"name": "Kitchen", "icon": "utensils"},
    {"name": "Air Conditioning", "icon": "snowflake"},
    {"name": "Heating", "icon": "flame"},
    {"name": "Washer", "icon": "washer"},
    {"name": "Dryer", "icon": "wind"},
    {"name": "Free Parking", "icon": "car"},
    {"name": "Gym", "icon": "dumbbell"},
    {"name": "Hot Tub", "icon": "bath"},
    {"name": "BBQ Grill", "icon": "flame"},
    {"name": "Fireplace", "icon": "fire"},
    {"name": "Beach Access", "icon": "umbrella"},
    {"name": "Mountain View", "icon": "mountain"},
    {"name": "Ocean View", "icon": "waves"},
    {"name": "Garden", "icon": "flower"},
    {"name": "Pet Friendly", "icon": "paw"},
    {"name": "Wheelchair Accessible", "icon": "wheelchair"},
]

COUNTRIES = [
    "Kenya", "Tanzania", "South Africa", "Botswana", "Namibia", "Rwanda",
    "Uganda", "Zimbabwe", "Zambia", "Mozambique", "Madagascar", "Mauritius",
    "Seychelles", "Morocco", "Egypt", "Ethiopia", "Ghana", "Senegal",
]
