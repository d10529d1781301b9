"""
Builtin register of URI scheme information.

Maps permanent IANA scheme mnemonics to (abbreviation, English name). The
table is read-only; BuiltinURIFactory consults it when creating scheme
values and falls back to default naming for anything not listed.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

SCHEME_REGISTRY: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "aaa": ("AAA", "Diameter Protocol"),
    "aaas": ("AAAS", "Diameter Protocol With Secure Transport"),
    "acap": ("ACAP", "Application Configuration Access Protocol"),
    "cap": ("CAP", "Calendar Access Protocol"),
    "cid": ("CID", "Content Identifier"),
    "crid": ("CRID", "TV-Anytime Content Reference Identifier"),
    "dict": ("DICT", "Dictionary Service Protocol"),
    "dns": ("DNS", "Domain Name System"),
    "file": ("FILE", "Host-Specific File Names"),
    "ftp": ("FTP", "File Transfer Protocol"),
    "geo": ("GEO", "Geographic Locations"),
    "gopher": ("GOPHER", "The Gopher Protocol"),
    "h323": ("H.323", "H.323"),
    "http": ("HTTP", "Hypertext Transfer Protocol"),
    "https": ("HTTPS", "Hypertext Transfer Protocol Secure"),
    "iax": ("IAX", "Inter-Asterisk eXchange Version 2"),
    "icap": ("ICAP", "Internet Content Adaptation Protocol"),
    "im": ("IM", "Instant Messaging"),
    "imap": ("IMAP", "Internet Message Access Protocol"),
    "info": ("INFO", "Information Assets With Identifiers In Public Namespaces"),
    "ipp": ("IPP", "Internet Printing Protocol"),
    "iris": ("IRIS", "Internet Registry Information Service"),
    "jabber": ("JABBER", "Jabber"),
    "ldap": ("LDAP", "Lightweight Directory Access Protocol"),
    "mailto": ("MAILTO", "Electronic Mail Address"),
    "mid": ("MID", "Message Identifier"),
    "msrp": ("MSRP", "Message Session Relay Protocol"),
    "msrps": ("MSRPS", "Message Session Relay Protocol Secure"),
    "mtqp": ("MTQP", "Message Tracking Query Protocol"),
    "mupdate": ("MUPDATE", "Mailbox Update (MUPDATE) Protocol"),
    "news": ("NEWS", "USENET News"),
    "nfs": ("NFS", "Network File System Protocol"),
    "nntp": ("NNTP", "USENET News using NNTP Access"),
    "opaquelocktoken": ("OPAQUELOCKTOKEN", "Opaquelocktoken"),
    "pop": ("POP", "Post Office Protocol V3"),
    "pres": ("PRES", "Presence"),
    "rtsp": ("RTSP", "Real Time Streaming Protocol"),
    "shttp": ("SHTTP", "Secure Hypertext Transfer Protocol"),
    "sieve": ("SIEVE", "ManageSieve Protocol"),
    "sip": ("SIP", "Session Initiation Protocol"),
    "sips": ("SIPS", "Secure Session Initiation Protocol"),
    "sms": ("SMS", "Short Message Service"),
    "snmp": ("SNMP", "Simple Network Management Protocol"),
    "telnet": ("TELNET", "Reference To Interactive Sessions"),
    "tftp": ("TFTP", "Trivial File Transfer Protocol"),
    "tip": ("TIP", "Transaction Internet Protocol"),
    "urn": ("URN", "Uniform Resource Names"),
    "vemmi": ("VEMMI", "Versatile Multimedia Interface"),
    "ws": ("WS", "WebSocket Connections"),
    "wss": ("WSS", "Encrypted WebSocket Connections"),
    "xmpp": ("XMPP", "Extensible Messaging And Presence Protocol"),
    "z39.50r": ("Z39.50R", "Z39.50 Retrieval"),
    "z39.50s": ("Z39.50S", "Z39.50 Session"),
})


def lookup_scheme(
    mnemonic: str,
    registry: Mapping[str, Tuple[str, str]] = SCHEME_REGISTRY,
) -> Optional[Tuple[str, str]]:
    """Return (abbreviation, english_name) for a mnemonic, or None."""
    return registry.get(mnemonic.lower())
