# Wire event names (the ``type`` field of every websocket envelope).
CURRENT_PLAYERS = "currentPlayers"
NEW_PLAYER = "newPlayer"
PLAYER_MOVEMENT = "playerMovement"
PLAYER_MOVED = "playerMoved"
UPDATE_NAME = "updateName"
PLAYER_UPDATED = "playerUpdated"
PLAYER_INTERACTION = "playerInteraction"
PLAYER_INTERACTION_RESPONSE = "playerInteractionResponse"
PLAYER_DISCONNECTED = "playerDisconnected"

DIRECTIONS = ("up", "down", "left", "right")
DEFAULT_DIRECTION = "down"

# New players spawn at integer coordinates in [SPAWN_MIN, SPAWN_MIN + SPAWN_SPAN).
SPAWN_MIN = 100
SPAWN_SPAN = 200

NAME_PREFIX = "Player-"
NAME_ID_CHARS = 4

__all__ = [
    "CURRENT_PLAYERS",
    "NEW_PLAYER",
    "PLAYER_MOVEMENT",
    "PLAYER_MOVED",
    "UPDATE_NAME",
    "PLAYER_UPDATED",
    "PLAYER_INTERACTION",
    "PLAYER_INTERACTION_RESPONSE",
    "PLAYER_DISCONNECTED",
    "DIRECTIONS",
    "DEFAULT_DIRECTION",
    "SPAWN_MIN",
    "SPAWN_SPAN",
    "NAME_PREFIX",
    "NAME_ID_CHARS",
]
