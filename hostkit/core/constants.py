"""
Project constants definitions
"""

# ============================================================
# Local Host
# ============================================================

LOCAL_HOSTNAME = "localhost"
LOCAL_USER_ENV_VARS = ("USER", "LOGNAME", "USERNAME")

# ============================================================
# Container Host
# ============================================================

DEFAULT_CONTAINER_USER = "root"

# ============================================================
# Default Values
# ============================================================

DEFAULT_SSH_PORT = 22
DEFAULT_FORWARD_AGENT = True

# ============================================================
# SSH Config
# ============================================================

SSH_CONFIG_PATH = "~/.ssh/config"

# ============================================================
# Environment
# ============================================================

ENV_PREFIX = "HOSTKIT_"
