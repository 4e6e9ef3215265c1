from lxml import etree

# attributes shown for service items that carry no XML
ITEM_SUMMARY_ATTRIBUTES = ("item_id", "item_class", "item_role")


def item_summary(item) -> str:
    """One-line description of a service item, like <Item item_id='x'>"""
    fields = [
        "%s=%r" % (name, getattr(item, name))
        for name in ITEM_SUMMARY_ATTRIBUTES
        if getattr(item, name, None) is not None
    ]
    if not fields:
        return repr(item)
    return "<%s %s>" % (type(item).__name__, " ".join(fields))


def xmlstring(root):
    if isinstance(root, str):
        return root
    if hasattr(root, "xmlelement"):
        root = root.xmlelement()
    try:
        return etree.tostring(root, pretty_print=True).decode("utf-8")
    except TypeError:
        return item_summary(root)
