"""Static venue content shown on the About, Equipment, Access and Contact views."""

VENUE = {
    "kicker": "LIVE SPACE",
    "name": "GACHI D.I.Y.",
    "full_name": "LIVE SPACE GACHI D.I.Y.",
    "tagline": "～Diverse Innovative Yard～",
    "address_lines": [
        "B1F Sound Building, 2-14-8 Dogenzaka",
        "Shibuya-ku, Tokyo 150-0043",
    ],
    "phone": "03-1234-5678",
    "email": "info@gachidiy-live.jp",
    "office_hours": "14:00 - 22:00 (Mon-Fri)",
    "directions": (
        "5 minutes walk from Shibuya Station (Hachiko Exit). "
        "Walk up Dogenzaka street, turn right at the 109 building, "
        "and we are located in the basement of the black building next to the convenience store."
    ),
    "socials": ["Instagram", "Twitter", "Facebook"],
    "established": 2024,
}

ABOUT_INTRO = (
    "Established in 2024, LIVE SPACE GACHI D.I.Y. is Tokyo's premier destination for alternative sounds. "
    "Located in the heart of Shibuya, we provide a sanctuary for artists and fans who live for the music."
)

ABOUT_FEATURES = [
    {
        "title": "Sound",
        "text": "L-Acoustics K Series system tuned for maximum clarity and impact across all genres.",
        "image": "https://picsum.photos/seed/sound/400/300",
    },
    {
        "title": "Bar",
        "text": "Extensive selection of craft beers, spirits, and signature cocktails to keep the night flowing.",
        "image": "https://picsum.photos/seed/bar/400/300",
    },
    {
        "title": "Space",
        "text": "Industrial brutalist design with high ceilings and excellent sightlines from anywhere in the room.",
        "image": "https://picsum.photos/seed/space/400/300",
    },
]

HERO_IMAGE = "https://picsum.photos/seed/concert/800/800?grayscale"

EQUIPMENT = [
    {
        "category": "PA System",
        "items": [
            "Main Console: Yamaha CL5",
            "Main Speakers: L-Acoustics KARA (x6 per side)",
            "Subwoofers: L-Acoustics SB18 (x4)",
            "Monitor Console: Yamaha QL1",
            "Wedges: d&b audiotechnik M4 (x8)",
        ],
    },
    {
        "category": "Microphones",
        "items": [
            "Shure SM58 (x10)",
            "Shure SM57 (x8)",
            "Sennheiser MD421 (x4)",
            "AKG C414 (x2)",
            "Shure Beta 52A (x2)",
        ],
    },
    {
        "category": "Backline",
        "items": [
            "Guitar Amp: Marshall JCM900 + 1960A",
            "Guitar Amp: Roland JC-120",
            "Bass Amp: Ampeg SVT-3PRO + 810E",
            "Drums: Pearl Masters Maple Complete (22, 16, 13, 12)",
            "DJ: Pioneer CDJ-2000NXS2 (x2) + DJM-900NXS2",
        ],
    },
    {
        "category": "Lighting",
        "items": [
            "Console: Avolites Tiger Touch II",
            "Moving Heads: Martin MAC Aura (x8)",
            "Spots: Clay Paky Mythos (x4)",
            "Strobes: Atomic 3000 (x2)",
            "Haze: Hazebase Base Hazer Pro",
        ],
    },
]

# (view id, nav label), in nav order
NAV_ITEMS = [
    ("home", "About"),
    ("schedule", "Schedule"),
    ("equipment", "Equipment"),
    ("access", "Access"),
    ("contact", "Contact"),
]
