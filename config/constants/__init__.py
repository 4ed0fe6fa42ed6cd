# Config Constants Package
# Import everything from sub-modules for easy access:
#   from config.constants import SITE_NAME, PAGINATION_INBOX, etc.

from .branding import *
from .limits import *
from .messages import *
