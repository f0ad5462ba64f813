class AppStatusCode:
    # -- AUTHENTICATION
    AUTHENTICATION_CREDENTIALS_INVALID = "200"
    AUTHENTICATION_TOKEN_INVALID = "201"
    AUTHENTICATION_USER_INVALID = "203"
    AUTHENTICATION_UNAUTHORIZED_ACCESS = "204"

    # -- VALIDATION / DATA
    INVALID_INPUT = "300"
    DUPLICATE_ADD_ERROR = "302"
    RESOURCE_NOT_FOUND = "303"

    # -- GENERIC
    OPERATION_FAILED = "500"
