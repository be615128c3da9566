"""
Library-wide constants.
"""

MDN_STATUS_REF = "https://developer.mozilla.org/en-US/docs/Web/HTTP/Status"

# HTTP status codes that have a dedicated MDN reference page
MDN_STATUS_CODES: frozenset[int] = frozenset(
    {
        # 1xx informational
        100,
        101,
        102,
        103,
        # 2xx success
        200,
        201,
        202,
        203,
        204,
        205,
        206,
        207,
        208,
        226,
        # 3xx redirection
        300,
        301,
        302,
        303,
        304,
        307,
        308,
        # 4xx client errors
        400,
        401,
        402,
        403,
        404,
        405,
        406,
        407,
        408,
        409,
        410,
        411,
        412,
        413,
        414,
        415,
        416,
        417,
        418,
        421,
        422,
        423,
        424,
        425,
        426,
        428,
        429,
        431,
        451,
        # 5xx server errors
        500,
        501,
        502,
        503,
        504,
        505,
        506,
        507,
        508,
        510,
        511,
    }
)

# Status assumed when an error value is derived from a raised exception
DEFAULT_ERROR_STATUS = 500

# Fixed-width, lexicographically sortable UTC rendering
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
