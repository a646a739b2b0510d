# enhancekit/logging/tags.py
"""
Subsystem tags prefixed to log messages.

Changing a tag here updates it project-wide.
"""

SELECTION = "[SELECTION]"
CONTEXT = "[CONTEXT]"
DISCOVERY = "[DISCOVERY]"
ENHANCE = "[ENHANCE]"
REWRITE = "[REWRITE]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
