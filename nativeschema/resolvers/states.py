"""
Component native state.
"""

from nativeschema.resolvers.annotations import build_object_property


def get_state(properties, types):
    """State schema; state members follow the same typing rules as props."""
    return {
        'properties': [build_object_property(prop, types, with_defaults=True) for prop in properties],
    }
