"""Known values for the solar-system catalogue.

Upstream vocabulary comes from the Solar System OpenData API
(https://api.le-systeme-solaire.net).  Keep the literal strings exactly as
the API spells them; matching is case-sensitive.
"""

DEFAULT_CATALOG_URL = "https://api.le-systeme-solaire.net/rest/bodies/"

# Kilometres per astronomical unit, as used for the distance column.
KM_PER_AU = 149_598_000

# The dashboard never shows more than this many bodies.
MAX_BODIES = 15

# bodyType value that marks a dwarf planet in the upstream payload.
DWARF_PLANET_BODY_TYPE = "Dwarf Planet"

# Shown in the Discovery column when upstream has no discovery date.
NO_DISCOVERY_DATE = "Prehistoric"

# Display text for a measurement the upstream record did not provide.
UNKNOWN_LABEL = "Unknown"
