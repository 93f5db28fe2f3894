"""
Component events.

An event is a prop typed `BubblingEventHandler<Payload, 'paperName'?>` or
`DirectEventHandler<Payload, 'paperName'?>`, optionally `| null`.
"""

from nativeschema.ast_nodes import (
    member_annotation,
    node_type,
    property_key_name,
    reference_name,
    type_arguments,
)
from nativeschema.errors import ShapeMismatchError
from nativeschema.resolvers.annotations import (
    build_type_annotation,
    type_literal_value,
    unwrap_nullable,
)

EVENT_HANDLERS = {
    'BubblingEventHandler': 'bubble',
    'DirectEventHandler': 'direct',
}


def event_handler(annotation):
    """The handler type reference if the annotation is an event handler, else None."""
    annotation, _ = unwrap_nullable(annotation)
    if node_type(annotation) == 'TSTypeReference' and reference_name(annotation) in EVENT_HANDLERS:
        return annotation
    return None


def is_event(prop):
    return node_type(prop) == 'TSPropertySignature' and event_handler(member_annotation(prop)) is not None


def build_event_schema(prop, types):
    name = property_key_name(prop)
    _, nullable = unwrap_nullable(member_annotation(prop))
    handler = event_handler(member_annotation(prop))
    params = type_arguments(handler)
    if not params:
        raise ShapeMismatchError(
            f'Event "{name}" must declare a payload type',
            node=handler,
            suggestion='Use DirectEventHandler<null> for events without a payload',
        )

    event = {
        'name': name,
        'optional': bool(prop.get('optional')) or nullable,
        'bubblingType': EVENT_HANDLERS[reference_name(handler)],
    }

    if len(params) > 1:
        found, paper_name = type_literal_value(params[1])
        if not found or not isinstance(paper_name, str):
            raise ShapeMismatchError(
                f'The paper event name of "{name}" must be a string literal',
                node=params[1],
            )
        event['paperTopLevelNameDeprecated'] = paper_name

    type_annotation = {'type': 'EventTypeAnnotation'}
    if node_type(params[0]) != 'TSNullKeyword':
        argument = build_type_annotation(params[0], types, name)
        if argument['type'] != 'ObjectTypeAnnotation':
            raise ShapeMismatchError(
                f'The payload of event "{name}" must be an object type, found {argument["type"]}',
                node=params[0],
            )
        type_annotation['argument'] = argument
    event['typeAnnotation'] = type_annotation

    return event


def get_events(properties, types):
    """Event entries for every event handler prop, in declaration order."""
    return [build_event_schema(prop, types) for prop in properties if is_event(prop)]
