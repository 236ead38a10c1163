# Logged event codes
MISSING_SHORT_URL = 'MISSING_SHORT_URL'
INVALID_SHORT_URL = 'INVALID_SHORT_URL'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
STORAGE_FAILURE = 'STORAGE_FAILURE'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
