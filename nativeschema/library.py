"""
Library schemas: component schemas wrapped into modules and combined.
"""


def wrap_component_schema(schema, module_name=None):
    """Wrap one ComponentSchema into a single-module library schema.

    Component options are spread into the component entry, matching what the
    native generators expect.
    """
    data = schema.to_dict()
    component = dict(data['options'] or {})
    component.update({
        'extendsProps': data['extendsProps'],
        'events': data['events'],
        'props': data['props'],
        'commands': data['commands'],
    })
    if 'state' in data:
        component['state'] = data['state']

    return {
        'modules': {
            module_name or data['filename']: {
                'type': 'Component',
                'components': {
                    data['componentName']: component,
                },
            },
        },
    }


def combine_schemas(schemas):
    """Merge library schemas; a later module with the same name replaces an earlier one."""
    combined = {'modules': {}}
    for schema in schemas:
        combined['modules'].update(schema.get('modules', {}))
    return combined


def filter_by_platform(library, platform):
    """Drop components that list the platform in `excludedPlatforms`.

    Modules left without components are removed. Platform names compare
    case-insensitively (`iOS`, `ios`).
    """
    if not platform:
        return library

    platform = platform.lower()
    modules = {}
    for module_name, module in library.get('modules', {}).items():
        if module.get('type') != 'Component':
            modules[module_name] = module
            continue
        components = {
            name: component
            for name, component in module.get('components', {}).items()
            if platform not in [p.lower() for p in component.get('excludedPlatforms') or []]
        }
        if components:
            modules[module_name] = dict(module, components=components)
    return {'modules': modules}
