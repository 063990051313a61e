#! /usr/bin/python3
"""
StatusCodes

Each status is an int constant defined by its name, ie: NOT_FOUND = 404.
Several names may share the same code, as different vendors give different
meanings to it (CALM and METHOD_FAILURE are both 420).

Usage:

    from httpnames import statuscodes
    statuscodes.get("TEAPOT")        # 418
    statuscodes.get_code(404).text   # "Not Found"
"""
import logging
from types import MappingProxyType

from .categories import MIN_CODE, MAX_CODE, category
from .exceptions import NotFoundError, UnknownCodeError

__all__ = list()

logger = logging.getLogger(__name__)

_TABLE = {
    # 1xx Informational
    "PROCEED": (100, "Continue"),
    "SWITCHING": (101, "Switching Protocols"),
    "PROCESSING": (102, "Processing (WebDAV)"),
    # 2xx Success
    "OK": (200, "OK"),
    "CREATED": (201, "Created"),
    "ACCEPTED": (202, "Accepted"),
    "NA_INFO": (203, "Non-Authoritative Information"),
    "NO_CONTENT": (204, "No Content"),
    "RESET_CONTENT": (205, "Reset Content"),
    "PARTIAL_CONTENT": (206, "Partial Content"),
    "MULTI_STATUS": (207, "Multi-Status (WebDAV)"),
    "ALREADY_REPORTED": (208, "Already Reported (WebDAV)"),
    "IM_USED": (226, "IM Used"),
    # 3xx Redirection
    "MULTIPLE_CHOICES": (300, "Multiple Choices"),
    "MOVED": (301, "Moved Permanently"),
    "FOUND": (302, "Found"),
    "OTHER": (303, "See Other"),
    "NOT_MODIFIED": (304, "Not Modified"),
    "USE_PROXY": (305, "Use Proxy"),
    "SWITCH_PROXY": (306, "Switch Proxy (Unused)"),
    "TEMP_REDIRECT": (307, "Temporary Redirect"),
    "PERM_REDIRECT": (308, "Permanent Redirect"),
    # 4xx Client Error
    "BAD_REQUEST": (400, "Bad Request"),
    "UNAUTHORIZED": (401, "Unauthorized"),
    "PAYMENT_REQUIRED": (402, "Payment Required"),
    "FORBIDDEN": (403, "Forbidden"),
    "NOT_FOUND": (404, "Not Found"),
    "NOT_ALLOWED": (405, "Method Not Allowed"),
    "NOT_ACCEPTABLE": (406, "Not Acceptable"),
    "PROXY_AUTH_REQUIRED": (407, "Proxy Authentication Required"),
    "REQUEST_TIMEOUT": (408, "Request Timeout"),
    "CONFLICT": (409, "Conflict"),
    "GONE": (410, "Gone"),
    "LENGTH_REQUIRED": (411, "Length Required"),
    "PRECONDITION_FAILED": (412, "Precondition Failed"),
    "ENTITY_TOO_LARGE": (413, "Request Entity Too Large"),
    "URI_TOO_LONG": (414, "Request-URI Too Long"),
    "UNSUPPORTED_MEDIA_TYPE": (415, "Unsupported Media Type"),
    "RANGE_NOT_SATISFIABLE": (416, "Requested Range Not Satisfiable"),
    "EXPECTATION_FAILED": (417, "Expectation Failed"),
    "TEAPOT": (418, "I'm a teapot (RFC 2324)"),
    "AUTH_TIMEOUT": (419, "Authentication Timeout"),
    "METHOD_FAILURE": (420, "Method Failure (Spring)"),
    "CALM": (420, "Enhance Your Calm (Twitter)"),
    "MISDIRECTED": (421, "Misdirected Request"),
    "UNPROCESSABLE_REQUEST": (422, "Unprocessable Entity (WebDAV)"),
    "LOCKED": (423, "Locked (WebDAV)"),
    "FAILED_DEPENDENCY": (424, "Failed Dependency (WebDAV)"),
    "UPGRADE_REQUIRED": (426, "Upgrade Required"),
    "PRECONDITION_REQUIRED": (428, "Precondition Required"),
    "TOO_MANY_REQUESTS": (429, "Too Many Requests"),
    "HEADER_FIELDS_TOO_LARGE": (431, "Request Header Fields Too Large"),
    "LOGIN_TIMEOUT": (440, "Login Time-out (Microsoft)"),
    "NO_RESPONSE": (444, "No Response (Nginx)"),
    "RETRY_WITH": (449, "Retry With (Microsoft)"),
    "PARENTAL_CONTROLS": (450, "Blocked by Windows Parental Controls (Microsoft)"),
    "UNAVAILABLE_FOR_LEGAL_REASONS": (451, "Unavailable For Legal Reasons"),
    "REDIRECT": (451, "Redirect (Microsoft)"),
    "HEADER_TOO_LARGE": (494, "Request Header Too Large (Nginx)"),
    "CERT_ERROR": (495, "SSL Certificate Error (Nginx)"),
    "NO_CERT": (496, "SSL Certificate Required (Nginx)"),
    "HTTP_TO_HTTPS": (497, "HTTP Request Sent to HTTPS Port (Nginx)"),
    "TOKEN_EXPIRED": (498, "Invalid Token (ArcGIS)"),
    "CLIENT_CLOSED": (499, "Client Closed Request (Nginx)"),
    "TOKEN_REQUIRED": (499, "Token Required (ArcGIS)"),
    # 5xx Server Error
    "INTERNAL_ERROR": (500, "Internal Server Error"),
    "NOT_IMPLEMENTED": (501, "Not Implemented"),
    "BAD_GATEWAY": (502, "Bad Gateway"),
    "SERVICE_UNAVAILABLE": (503, "Service Unavailable"),
    "GATEWAY_TIMEOUT": (504, "Gateway Timeout"),
    "HTTP_VERSION_NOT_SUPPORTED": (505, "HTTP Version Not Supported"),
    "VARIANT_ALSO_NEGOTIATES": (506, "Variant Also Negotiates"),
    "INSUFFICIENT_STORAGE": (507, "Insufficient Storage (WebDAV)"),
    "LOOP_DETECTED": (508, "Loop Detected (WebDAV)"),
    "BANDWIDTH_LIMIT_EXCEEDED": (509, "Bandwidth Limit Exceeded (Apache)"),
    "NOT_EXTENDED": (510, "Not Extended"),
    "NETWORK_AUTH_REQUIRED": (511, "Network Authentication Required"),
    "UNKNOWN_ERROR": (520, "Unknown Error (Cloudflare)"),
    "NETWORK_READ_TIMEOUT": (598, "Network read timeout error (Microsoft)"),
    "NETWORK_CONNECT_TIMEOUT": (599, "Network connect timeout error (Microsoft)"),
    }

for _name, (_code, _text) in _TABLE.items():
    assert isinstance(_code, int) and MIN_CODE <= _code <= MAX_CODE, _name
    assert _text, _name

CODES = MappingProxyType({name: code for name, (code, text) in _TABLE.items()})
PHRASES = MappingProxyType({name: text for name, (code, text) in _TABLE.items()})

_NAMES_BY_CODE = dict()
for _name, _code in CODES.items():
    _NAMES_BY_CODE.setdefault(_code, list()).append(_name)
_NAMES_BY_CODE = MappingProxyType({code: tuple(names) for code, names in _NAMES_BY_CODE.items()})


class StatusCode:
    """
    Read only record of a registered status.

    :property name: registered name, ie: "NOT_FOUND"
    :property code: int code, ie: 404
    :property text: reason phrase, ie: "Not Found"
    :property category: class of response, ie: "Client Error"

    """
    __slots__ = ("_name", "_code")

    def __init__(self, name):
        self._name = name
        self._code = get(name)

    def __repr__(self):
        return "{} {}".format(self.code, self.text)

    def __int__(self):
        return self._code

    def __eq__(self, other):
        if not isinstance(other, StatusCode):
            return NotImplemented
        return (self.name, self.code) == (other.name, other.code)

    def __hash__(self):
        return hash((self.name, self.code))

    @property
    def name(self):
        return self._name

    @property
    def code(self):
        return self._code

    @property
    def text(self):
        return PHRASES[self.name]

    @property
    def category(self):
        return category(self.code)


for _name, _code in CODES.items():
    __all__.append(_name)
    globals()[_name] = _code

del _name, _code, _text


def get(name):
    """
    Gets the number code of a status by its name
    :param name: str with registered name, ie: "TEAPOT"
    :return: int code
    :raises: NotFoundError if name is not registered

    """
    try:
        return CODES[name]
    except (KeyError, TypeError):
        logger.debug("Status name not found: %r", name)
        raise NotFoundError(name) from None


def get_status(name):
    """
    Gets the StatusCode record of a name
    :raises: NotFoundError if name is not registered

    """
    return StatusCode(name)


def get_code(code):
    """
    Gets the number code of status and returns a StatusCode instance of the
    first name registered for it
    :param code: int with number code
    :return: StatusCode instance
    :raises: UnknownCodeError if no name uses the code

    """
    assert isinstance(code, int)
    names = names_for(code)
    if names:
        return StatusCode(names[0])
    else:
        logger.debug("Status code not registered: %r", code)
        raise UnknownCodeError(code)


def names_for(code):
    return _NAMES_BY_CODE.get(code, tuple())


def synonyms():
    """
    Codes shared by more than one name
    :return: dict with int code as key and tuple of names as value

    """
    return {code: names for code, names in _NAMES_BY_CODE.items() if len(names) > 1}


def phrase(name):
    get(name)
    return PHRASES[name]


def is_registered(name):
    try:
        get(name)
    except NotFoundError:
        return False
    return True


def items():
    return iter(CODES.items())


def names():
    return tuple(CODES)


def values():
    return tuple(sorted(_NAMES_BY_CODE))


__all__.extend(["CODES",
                "PHRASES",
                "StatusCode",
                "get",
                "get_status",
                "get_code",
                "names_for",
                "synonyms",
                "phrase",
                "is_registered",
                "items",
                "names",
                "values",
                "NotFoundError",
                "UnknownCodeError"])
