"""Fixed donation center records loaded by the seed_centers command."""

DONATION_CENTERS: list[dict[str, object]] = [
    {
        "name": "Central Blood Bank of Azerbaijan",
        "address": "14 Yusif Safarov Street",
        "city": "Baku",
        "phone": "+994 12 493 0712",
        "latitude": 40.4093,
        "longitude": 49.8671,
        "hours": "Mon-Fri 9:00-17:00, Sat 9:00-14:00",
    },
    {
        "name": "Republican Blood Transfusion Station",
        "address": "3 Bakikhanov Street",
        "city": "Baku",
        "latitude": 40.3897,
        "longitude": 49.8274,
        "hours": "Mon-Fri 8:00-18:00",
    },
    {
        "name": "Ganja Regional Blood Bank",
        "address": "24 Javad Khan Street",
        "city": "Ganja",
        "latitude": 40.6828,
        "longitude": 46.3606,
        "hours": "Mon-Fri 9:00-17:00",
    },
    {
        "name": "Sumqayit Blood Center",
        "address": "12 Nizami Street",
        "city": "Sumqayit",
        "latitude": 40.5897,
        "longitude": 49.6686,
        "hours": "Mon-Fri 9:00-16:00",
    },
    {
        "name": "Lankaran Regional Blood Station",
        "address": "Hospital Complex",
        "city": "Lankaran",
        "latitude": 38.754,
        "longitude": 48.851,
        "hours": "Mon-Fri 9:00-15:00",
    },
]
