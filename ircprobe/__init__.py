"""IRC server health probe.

Connects to an IRC server over TLS, verifies a designated user is online
from the expected host and that the server has not rebooted since the
previous check.
"""

__version__ = "1.0.0"
