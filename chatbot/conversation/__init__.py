# Conversation controller package.
# Exposes the message log, the controller state machine and reply sources.

from .types import Message, Role
from .conversation import Conversation, SEED_GREETING
from .cancellation import CancellationToken
from .controller import ConversationController, State
from .sources import LocalReplySource, RemoteReplyError, RemoteReplySource, ReplySource, thinking_delay

__all__ = [
    "Message",
    "Role",
    "Conversation",
    "SEED_GREETING",
    "CancellationToken",
    "ConversationController",
    "State",
    "ReplySource",
    "LocalReplySource",
    "RemoteReplySource",
    "RemoteReplyError",
    "thinking_delay",
]
