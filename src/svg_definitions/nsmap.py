"""xml namespace entries for svg files.

:created: 2026-10-18

Only the namespaces an svg_definitions attribute can live in. The `xml` prefix is
reserved by lxml, so it is kept out of NSMAP and only used to qualify attribute
names like `xml:space`.
"""

from __future__ import annotations

from lxml.etree import QName

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

NSMAP: dict[str | None, str] = {
    None: SVG_NAMESPACE,
    "xlink": XLINK_NAMESPACE,
}

_PREFIX2NAMESPACE = {"xlink": XLINK_NAMESPACE, "xml": XML_NAMESPACE}
_NAMESPACE2PREFIX = {v: k for k, v in _PREFIX2NAMESPACE.items()}


def new_qname(prefixed_name: str) -> str:
    """Qualify a `prefix:name` attribute name for lxml.

    :param prefixed_name: an attribute name, e.g. "xlink:href" or "fill"
    :return: "{namespace}name" for known prefixes, else the name unchanged
    :raises KeyError: if the prefix is not xlink or xml
    """
    if ":" not in prefixed_name:
        return prefixed_name
    prefix, name = prefixed_name.split(":")
    return str(QName(_PREFIX2NAMESPACE[prefix], name))


def get_prefixed_name(qualified_name: str) -> str | None:
    """Reverse `new_qname` for names read by lxml.

    :param qualified_name: an lxml attribute name, e.g. "{...xlink}href" or "fill"
    :return: "xlink:href", "fill", or None if the namespace is not a known prefix
    """
    qname = QName(qualified_name)
    if qname.namespace is None:
        return qname.localname
    prefix = _NAMESPACE2PREFIX.get(qname.namespace)
    if prefix is None:
        return None
    return f"{prefix}:{qname.localname}"
