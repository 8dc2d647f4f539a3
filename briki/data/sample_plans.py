"""Sample travel plans inserted the first time the service starts on an empty database.

Amounts are whole currency units; ``country`` is the destination a plan is sold
for, with ``"all"`` meaning it is valid everywhere.
"""

from __future__ import annotations

from typing import Any

SAMPLE_PLANS: list[dict[str, Any]] = [
    {
        "name": "Basic Coverage",
        "provider": "Assist Card",
        "base_price": 95,
        "medical_coverage": 35000,
        "trip_cancellation": "Up to 1,500",
        "baggage_protection": 1000,
        "emergency_evacuation": 50000,
        "adventure_activities": False,
        "rental_car_coverage": None,
        "rating": "4.2",
        "reviews": 312,
        "country": "all",
    },
    {
        "name": "Premium Plan",
        "provider": "AXA Assistance",
        "base_price": 145,
        "medical_coverage": 100000,
        "trip_cancellation": "Up to 3,000",
        "baggage_protection": 2000,
        "emergency_evacuation": 250000,
        "adventure_activities": False,
        "rental_car_coverage": 35000,
        "rating": "4.7",
        "reviews": 528,
        "country": "United States",
    },
    {
        "name": "Standard Coverage",
        "provider": "IATI",
        "base_price": 78,
        "medical_coverage": 50000,
        "trip_cancellation": "Up to 2,000",
        "baggage_protection": 1500,
        "emergency_evacuation": 100000,
        "adventure_activities": False,
        "rental_car_coverage": None,
        "rating": "4.3",
        "reviews": 204,
        "country": "Spain",
    },
    {
        "name": "Essential Plan",
        "provider": "Starr",
        "base_price": 65,
        "medical_coverage": 25000,
        "trip_cancellation": "Up to 1,000",
        "baggage_protection": 800,
        "emergency_evacuation": None,
        "adventure_activities": False,
        "rental_car_coverage": None,
        "rating": "4.0",
        "reviews": 97,
        "country": "Colombia",
    },
    {
        "name": "Premium Protection",
        "provider": "SURA",
        "base_price": 115,
        "medical_coverage": 75000,
        "trip_cancellation": "Up to 2,500",
        "baggage_protection": 1800,
        "emergency_evacuation": 150000,
        "adventure_activities": True,
        "rental_car_coverage": 25000,
        "rating": "4.5",
        "reviews": 341,
        "country": "Mexico",
    },
    {
        "name": "Travel Care Classic",
        "provider": "Allianz",
        "base_price": 110,
        "medical_coverage": 100000,
        "trip_cancellation": "Up to 3,000",
        "baggage_protection": 1500,
        "emergency_evacuation": 200000,
        "adventure_activities": False,
        "rental_car_coverage": 40000,
        "rating": "4.6",
        "reviews": 689,
        "country": "all",
    },
    {
        "name": "Explorer Plan",
        "provider": "World Nomads",
        "base_price": 155,
        "medical_coverage": 200000,
        "trip_cancellation": "Up to 5,000",
        "baggage_protection": 3000,
        "emergency_evacuation": 500000,
        "adventure_activities": True,
        "rental_car_coverage": 35000,
        "rating": "4.7",
        "reviews": 874,
        "country": "all",
    },
    {
        "name": "Multi-Trip Annual",
        "provider": "Europ Assistance",
        "base_price": 180,
        "medical_coverage": 150000,
        "trip_cancellation": "Up to 4,000",
        "baggage_protection": 2000,
        "emergency_evacuation": 300000,
        "adventure_activities": True,
        "rental_car_coverage": 50000,
        "rating": "4.5",
        "reviews": 455,
        "country": "Spain",
    },
]
