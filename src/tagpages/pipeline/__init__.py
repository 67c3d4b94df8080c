"""Host build pipeline: reading, collections, layouts and writing."""

from tagpages.pipeline.collections import Collections, collections
from tagpages.pipeline.layouts import Layouts, layouts
from tagpages.pipeline.site import Done, Files, Plugin, Site

__all__ = [
    "Collections",
    "Done",
    "Files",
    "Layouts",
    "Plugin",
    "Site",
    "collections",
    "layouts",
]
