"""Known sports and activities a game can be created for."""

SPORTS: frozenset[str] = frozenset(
    {
        # Traditional sports
        "football",
        "basketball",
        "soccer",
        "tennis",
        "volleyball",
        "badminton",
        "table-tennis",
        "cricket",
        "baseball",
        "softball",
        "rugby",
        "hockey",
        "ice-hockey",
        "swimming",
        "running",
        "cycling",
        "golf",
        # Asian sports and games
        "sepak-takraw",
        "kabaddi",
        "kho-kho",
        "gilli-danda",
        "carrom",
        "chess",
        "mahjong",
        "go",
        "xiangqi",
        # Martial arts
        "karate",
        "taekwondo",
        "judo",
        "kung-fu",
        "muay-thai",
        "boxing",
        "wrestling",
        "jiu-jitsu",
        "aikido",
        "capoeira",
        # Dance
        "dancing",
        "zumba",
        "aerobic-dance",
        "hip-hop-dance",
        "salsa",
        "bhangra",
        "bollywood-dance",
        "k-pop-dance",
        "ballroom-dancing",
        "latin-dance",
        # Yoga and wellness
        "yoga",
        "pilates",
        "meditation",
        "tai-chi",
        "qigong",
        "stretching",
        "calisthenics",
        # Fitness
        "gym",
        "weightlifting",
        "crossfit",
        "functional-training",
        "cardio",
        "hiit",
        "bodybuilding",
        # Outdoor
        "hiking",
        "trekking",
        "rock-climbing",
        "mountaineering",
        "camping",
        "kayaking",
        "canoeing",
        "surfing",
        "skateboarding",
        "rollerblading",
        # Other
        "archery",
        "shooting",
        "fishing",
        "darts",
        "billiards",
        "snooker",
        "bowling",
        "skating",
        "ice-skating",
        "skiing",
        "snowboarding",
    }
)
