"""
Sample reference data inserted when a reference table is empty.
"""

SAMPLE_CENTERS = [
    {
        "name": "Addis Recycling Center",
        "address": "Bole Road, Addis Ababa",
        "phone": "0911223344",
        "latitude": 9.0222,
        "longitude": 38.7468,
        "accepted_waste_types": ["Plastic", "Paper", "Glass", "Metal"],
        "operating_hours": "Mon-Fri: 8AM-5PM, Sat: 9AM-2PM",
    },
    {
        "name": "Green Ethiopia Recycling",
        "address": "Meskel Square, Addis Ababa",
        "phone": "0922334455",
        "latitude": 9.0127,
        "longitude": 38.7612,
        "accepted_waste_types": ["Plastic", "Electronic", "Metal"],
        "operating_hours": "Mon-Sat: 9AM-6PM",
    },
    {
        "name": "Hawassa Waste Management",
        "address": "Main Street, Hawassa",
        "phone": "0933445566",
        "latitude": 7.0622,
        "longitude": 38.4777,
        "accepted_waste_types": ["Plastic", "Paper", "Organic"],
        "operating_hours": "Mon-Fri: 8:30AM-4:30PM",
    },
]

SAMPLE_TUTORIALS = [
    {
        "title": "Home Composting Basics",
        "description": "Learn how to start composting at home with minimal equipment",
        "image_url": "https://images.unsplash.com/photo-1591955506264-3f5a6834570a?ixlib=rb-4.0.3",
        "video_url": "",
        "steps": [
            "Collect kitchen scraps like fruit and vegetable peels",
            "Mix with dry materials like leaves or shredded paper",
            "Keep your compost moist but not soggy",
            "Turn the pile regularly to add oxygen",
            "Harvest your compost after 3-6 months",
        ],
        "category": "Composting",
    },
    {
        "title": "Plastic Bottle Planters",
        "description": "Turn plastic waste into beautiful plant containers",
        "image_url": "https://images.unsplash.com/photo-1582131503261-fca1d1c781a8?ixlib=rb-4.0.3",
        "video_url": "",
        "steps": [
            "Clean a plastic bottle thoroughly",
            "Cut the bottle in half or create a side opening",
            "Make drainage holes in the bottom",
            "Decorate the outside if desired",
            "Add soil and plants",
        ],
        "category": "Upcycling",
    },
    {
        "title": "Paper Recycling at Home",
        "description": "Make new paper from old newspapers and documents",
        "image_url": "https://images.unsplash.com/photo-1530587191325-3db32d826c18?ixlib=rb-4.0.3",
        "video_url": "",
        "steps": [
            "Tear paper into small pieces",
            "Soak in water overnight",
            "Blend into a pulp",
            "Spread on a screen to dry",
            "Press and let dry completely",
        ],
        "category": "Recycling",
    },
]
