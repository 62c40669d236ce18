DEFAULT_ICON = '🎬'

# First matching keyword wins
KEYWORD_ICONS = [
    ('prison', '🔒'),
    ('escape', '🔒'),
    ('space', '🚀'),
    ('star', '🚀'),
    ('dream', '💭'),
    ('hero', '🦸'),
    ('masked', '🦸'),
    ('family', '👨‍👩‍👦'),
    ('boss', '👔'),
    ('ring', '💍'),
    ('king', '👑'),
    ('virtual', '💻'),
    ('club', '🥊'),
    ('life', '🌱'),
    ('journey', '🧭'),
    ('urban', '🏙️'),
    ('city', '🏙️'),
]


def get_movie_icon(movie_name):
    if not movie_name:
        return DEFAULT_ICON

    lowered = movie_name.lower()
    for keyword, icon in KEYWORD_ICONS:
        if keyword in lowered:
            return icon

    return DEFAULT_ICON
