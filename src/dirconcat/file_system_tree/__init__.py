"""File system traversal helpers: content sniffing, directory listing and tree rendering.

This package provides the pieces used to render a filtered directory hierarchy as a
text tree and to classify files as text or binary before their contents are written.
"""
