"""
Component props.
"""

from nativeschema.resolvers.annotations import build_object_property
from nativeschema.resolvers.events import is_event


def get_props(properties, types):
    """Typed prop entries for every property that is not an event handler."""
    return [
        build_object_property(prop, types, with_defaults=True)
        for prop in properties
        if not is_event(prop)
    ]
