from fastapi.security import HTTPBearer

# Pulls the bearer token out of the Authorization header.
# auto_error is off so a missing token gets our own 401 body.
bearer_scheme = HTTPBearer(auto_error=False)
