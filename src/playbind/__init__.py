"""Playbind — option marshalling and request routing for browser-automation bindings.

Turns typed option records into the string-keyed maps a browser-control
protocol expects, decodes response maps back into records, and matches
intercepted request URLs against globs, regular expressions, or predicates.

Basic usage::

    from dataclasses import dataclass

    from playbind import normalize, option, RouteTable

    @dataclass
    class ScreenshotOptions:
        full_page: bool | None = option("fullPage", default=None)
        path: str | None = None

    normalize({"type": "png"}, ScreenshotOptions(full_page=True))
    # {"type": "png", "fullPage": True}

    routes = RouteTable()
    routes.add("**/*.png", lambda route, request: route.abort())
"""

__version__ = "0.1.0"
__all__ = [
    "BindingConfig",
    "MatcherKind",
    "OptionsError",
    "PlaybindError",
    "RouteHandlerEntry",
    "RouteTable",
    "SchemaMismatchError",
    "URLMatcher",
    "UnknownMatcherError",
    "is_function_body",
    "merge_options",
    "normalize",
    "option",
    "rehydrate",
    "rehydrate_new",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "BindingConfig": "playbind.config",
    "MatcherKind": "playbind.routing.matcher",
    "OptionsError": "playbind.errors",
    "PlaybindError": "playbind.errors",
    "RouteHandlerEntry": "playbind.routing.route",
    "RouteTable": "playbind.routing.table",
    "SchemaMismatchError": "playbind.errors",
    "URLMatcher": "playbind.routing.matcher",
    "UnknownMatcherError": "playbind.errors",
    "is_function_body": "playbind.expressions",
    "merge_options": "playbind.options.normalize",
    "normalize": "playbind.options.normalize",
    "option": "playbind.options.fields",
    "rehydrate": "playbind.options.rehydrate",
    "rehydrate_new": "playbind.options.rehydrate",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import playbind`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
