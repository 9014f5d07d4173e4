# backend/config/settings/development.py
from .base import *

DEBUG = True

ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

# Show domain logging on the console while developing
LOGGING['handlers']['console']['level'] = 'INFO'
