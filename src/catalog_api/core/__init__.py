# Logic that is not tied to a single request/response shape:
# - Password hashing and bearer token signing (security)
# - Document lookup shared by the resource routers (documents)
