"""Shared serializer helpers."""


def page_data(page, serializer_class, context=None):
    """Render a `Page` envelope, or None when the page is out of range."""
    if page is None:
        return None
    return {
        "target": page.target,
        "results": serializer_class(page.items, many=True, context=context).data,
        "current_page": page.current_page,
        "number_of_pages": page.number_of_pages,
        "query": page.query,
    }
