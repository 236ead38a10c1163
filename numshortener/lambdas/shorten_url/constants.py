# Logged event codes
URL_SHORTENED = 'URL_SHORTENED'
MISSING_URL = 'MISSING_URL'
INVALID_URL = 'INVALID_URL'
MALFORMED_BODY = 'MALFORMED_BODY'
STORAGE_FAILURE = 'STORAGE_FAILURE'
