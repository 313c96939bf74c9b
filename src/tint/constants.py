# Beacon handoff window (juvenile -> adult replacement)
BEACON_PERIOD_MS = 1000
BEACON_KEEP_MS = 4000
BEACON_RADIUS = 2.5
BEACON_RADIUS_SQ = BEACON_RADIUS * BEACON_RADIUS

# Reconciliation sweep and client re-apply cadence
SWEEP_PERIOD_MS = 5000
CLIENT_REAPPLY_MS = 500

# Parent search radius for breeding inheritance
PARENT_SEARCH_RADIUS = 16.0
MAX_PARENTS = 2

# Channel equality tolerance used by neutral checks
NEUTRAL_EPSILON = 1e-4

# Orphan fallback mutation chance is never allowed above this
FALLBACK_MUTATION_CAP = 0.10

# Packed color written when a saved tint lacks a color value
OPAQUE_WHITE = 0xFFFFFFFF

ARCTIC_TYPES = ("arctic", "polar", "panda")
LIFECYCLE_VARIANTS = ("age", "stage", "lifestage", "lifeStage")

SIDE_SERVER = "server"
SIDE_CLIENT = "client"
