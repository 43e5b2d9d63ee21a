"""
Sample catalogue for local development and demos.
"""

from __future__ import annotations

from decimal import Decimal

SAMPLE_SHELTER = {
    "name": "Hills Animal Rescue",
    "location": "Hills District, NSW",
    "address": "123 Pet Street, Hills NSW 2154",
    "phone": "+61 2 9876 5432",
    "email": "contact@hillsanimalrescue.org.au",
    "rating": Decimal("4.8"),
    "review_count": 156,
}

# Inserted in this order; the listing shows the last one first.
SAMPLE_PETS = [
    {
        "name": "Buddy",
        "species": "dog",
        "breed": "Golden Retriever",
        "age": "3 years",
        "weight": "28 kg",
        "gender": "male",
        "size": "large",
        "color": "golden",
        "description": (
            "Buddy is a friendly and energetic Golden Retriever who loves playing fetch "
            "and swimming. He's great with kids and other dogs!"
        ),
        "characteristics": ["Friendly", "Energetic", "Good with kids", "Loves water"],
        "images": ["https://images.unsplash.com/photo-1552053831-71594a27632d?w=400&h=400&fit=crop"],
    },
    {
        "name": "Luna",
        "species": "cat",
        "breed": "Domestic Shorthair",
        "age": "2 years",
        "weight": "4 kg",
        "gender": "female",
        "size": "medium",
        "color": "calico",
        "description": (
            "Luna is a sweet and gentle cat who loves to cuddle. She's looking for a quiet "
            "home where she can be the center of attention."
        ),
        "characteristics": ["Gentle", "Affectionate", "Indoor cat", "Quiet"],
        "images": ["https://images.unsplash.com/photo-1514888286974-6c03e2ca1dba?w=400&h=400&fit=crop"],
    },
    {
        "name": "Max",
        "species": "dog",
        "breed": "Border Collie",
        "age": "1 year",
        "weight": "18 kg",
        "gender": "male",
        "size": "medium",
        "color": "black and white",
        "description": (
            "Max is a smart and active Border Collie puppy. He needs an active family who "
            "can keep up with his energy and intelligence."
        ),
        "characteristics": ["Intelligent", "Active", "Trainable", "Needs exercise"],
        "images": ["https://images.unsplash.com/photo-1551717743-49959800b1f6?w=400&h=400&fit=crop"],
    },
]
