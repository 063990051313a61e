"""
Categories

The first digit of a status code specifies one of five classes of response.
A client that recognizes nothing else should still recognize these five.
"""
import logging

from .exceptions import UnknownCodeError

__all__ = ["INFORMATIONAL",
           "SUCCESS",
           "REDIRECTION",
           "CLIENT_ERROR",
           "SERVER_ERROR",
           "ALL",
           "MIN_CODE",
           "MAX_CODE",
           "category",
           "describe",
           "is_error"]

logger = logging.getLogger(__name__)

MIN_CODE = 100
MAX_CODE = 599

INFORMATIONAL = "Informational"
SUCCESS = "Success"
REDIRECTION = "Redirection"
CLIENT_ERROR = "Client Error"
SERVER_ERROR = "Server Error"
ALL = [INFORMATIONAL,
       SUCCESS,
       REDIRECTION,
       CLIENT_ERROR,
       SERVER_ERROR]

DESCRIPTIONS = {
    INFORMATIONAL: "Request received, continuing process. A provisional response made of the "
                   "status line and optional headers only. HTTP/1.0 defines no 1xx codes, so "
                   "they are not sent to HTTP/1.0 clients.",
    SUCCESS: "The action requested by the client was received, understood, accepted and "
             "processed successfully.",
    REDIRECTION: "The client must take additional action to complete the request. A user agent "
                 "may follow on its own only for GET or HEAD, and should stop after five "
                 "redirects.",
    CLIENT_ERROR: "The client seems to have erred. Except for HEAD, the server should explain "
                  "the error and whether it is temporary or permanent.",
    SERVER_ERROR: "The server failed to fulfil an apparently valid request. Except for HEAD, the "
                  "server should explain the error and whether it is temporary or permanent.",
    }


def category(value):
    """
    Gives the class of response of a status code
    :param value: int with number code
    :return: one of INFORMATIONAL, SUCCESS, REDIRECTION, CLIENT_ERROR, SERVER_ERROR
    :raises: UnknownCodeError if value is not an int in [MIN_CODE, MAX_CODE]

    """
    if isinstance(value, bool) or not isinstance(value, int) or not MIN_CODE <= value <= MAX_CODE:
        logger.debug("No category for %r", value)
        raise UnknownCodeError(value)
    return ALL[value // 100 - 1]


def describe(name):
    """
    Gives a short description of a class of response
    :param name: one of the names in ALL
    :raises: KeyError if name is not a class of response

    """
    return DESCRIPTIONS[name]


def is_error(value):
    return category(value) in (CLIENT_ERROR, SERVER_ERROR)
