"""Strongly typed identifiers for gallery domain entities.

Entity rows are keyed by database-assigned integers; NewType keeps an
artwork id from being passed where an artist id is expected.
"""

from typing import NewType

ArtistId = NewType("ArtistId", int)
ArtworkId = NewType("ArtworkId", int)
InvitationId = NewType("InvitationId", int)

# Identity provider user id (opaque string owned by Stack Auth)
IdentityUserId = NewType("IdentityUserId", str)
