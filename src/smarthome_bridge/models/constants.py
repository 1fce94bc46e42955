"""
Smart-home wire constants: payload versions, namespaces, message names.
"""


class PayloadVersion:
    V2 = "2"
    V3 = "3"
    UNKNOWN = "-1"


class Namespace:
    # v2
    CONTROL_V2 = "Alexa.ConnectedHome.Control"
    DISCOVERY_V2 = "Alexa.ConnectedHome.Discovery"
    # v3
    CONTROL_V3 = "Alexa"
    DISCOVERY_V3 = "Alexa.Discovery"
    AUTHORIZATION_V3 = "Alexa.Authorization"


class MessageName:
    DISCOVER_RESPONSE_V2 = "DiscoverAppliancesResponse"
    DISCOVER_RESPONSE_V3 = "Discover.Response"
    ERROR_RESPONSE = "ErrorResponse"
    EXPIRED_ACCESS_TOKEN = "ExpiredAccessTokenError"
    DEPENDENT_SERVICE_UNAVAILABLE = "DependentServiceUnavailableError"
    UNEXPECTED_INFORMATION = "UnexpectedInformationReceivedError"


class ErrorType:
    INVALID_AUTHORIZATION_CREDENTIAL = "INVALID_AUTHORIZATION_CREDENTIAL"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Backend res_code for an expired or revoked access token
RES_CODE_UNAUTHORIZED = 401
