"""URI schemes recognized in autolinks.

The table is reference data: the IANA-registered schemes plus the informal
schemes CommonMark whitelists. Membership is case-insensitive over ASCII
letters only; nothing else about the candidate is normalized.

Example:
    >>> from marklex.schemes import is_valid_scheme, has_valid_scheme
    >>> is_valid_scheme("HTTP")
    True
    >>> is_valid_scheme(" http")
    False
    >>> has_valid_scheme("irc://irc.libera.chat/#commonmark")
    True
"""

IANA_SCHEMES: frozenset[str] = frozenset((
    "coap", "doi", "javascript",
    "aaa", "aaas", "about", "acap",
    "cap", "cid", "crid", "data", "dav", "dict", "dns", "file", "ftp",
    "geo", "go", "gopher", "h323", "http", "https", "iax", "icap", "im",
    "imap", "info", "ipp", "iris", "iris.beep", "iris.xpc", "iris.xpcs",
    "iris.lwz", "ldap", "mailto", "mid", "msrp", "msrps", "mtqp",
    "mupdate", "news", "nfs", "ni", "nih", "nntp", "opaquelocktoken", "pop",
    "pres", "rtsp", "service", "session", "shttp", "sieve", "sip", "sips",
    "sms", "snmp", "soap.beep", "soap.beeps", "tag", "tel", "telnet", "tftp",
    "thismessage", "tn3270", "tip", "tv", "urn", "vemmi", "ws", "wss",
    "xcon", "xcon-userid", "xmlrpc.beep", "xmlrpc.beeps", "xmpp", "z39.50r",
    "z39.50s",
))  # fmt: skip

UNOFFICIAL_SCHEMES: frozenset[str] = frozenset((
    "adiumxtra", "afp", "afs", "aim", "apt", "attachment", "aw",
    "beshare", "bitcoin", "bolo", "callto", "chrome", "chrome-extension",
    "com-eventbrite-attendee", "content", "cvs", "dlna-playsingle",
    "dlna-playcontainer", "dtn", "dvb", "ed2k", "facetime", "feed",
    "finger", "fish", "gg", "git", "gizmoproject", "gtalk",
    "hcp", "icon", "ipn", "irc", "irc6", "ircs", "itms", "jar",
    "jms", "keyparc", "lastfm", "ldaps", "magnet", "maps", "market",
    "message", "mms", "ms-help", "msnim", "mumble", "mvn", "notes",
    "oid", "palm", "paparazzi", "platform", "proxy", "psyc", "query",
    "res", "resource", "rmi", "rsync", "rtmp", "secondlife", "sftp",
    "sgn", "skype", "smb", "soldat", "spotify", "ssh", "steam", "svn",
    "teamspeak", "things", "udp", "unreal", "ut2004", "ventrilo",
    "view-source", "webcal", "wtai", "wyciwyg", "xfire", "xri",
    "ymsgr",
))  # fmt: skip

SCHEMES: frozenset[str] = IANA_SCHEMES | UNOFFICIAL_SCHEMES

# str.lower() would also fold non-ASCII letters such as U+212A KELVIN SIGN
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def is_valid_scheme(candidate: str) -> bool:
    """Check if candidate is a known autolink scheme.

    Only ASCII letter case is folded. Surrounding whitespace, a trailing
    colon or any other decoration makes the candidate invalid; the caller
    passes exactly the scheme token.

    Args:
        candidate: Scheme token, e.g. ``"https"`` or ``"MAILTO"``

    Returns:
        True if the folded candidate is in SCHEMES.

    """
    return candidate.translate(_ASCII_LOWER) in SCHEMES


def has_valid_scheme(uri: str) -> bool:
    """Check if the text before the first colon of uri is a known scheme.

    Returns False when uri has no colon.
    """
    scheme, sep, _ = uri.partition(":")
    return bool(sep) and is_valid_scheme(scheme)


__all__ = [
    "IANA_SCHEMES",
    "SCHEMES",
    "UNOFFICIAL_SCHEMES",
    "has_valid_scheme",
    "is_valid_scheme",
]
