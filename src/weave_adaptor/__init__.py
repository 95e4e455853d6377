"""weave_adaptor — write middleware once, run it under any calling convention.

Supports single-pass ``(request, next)`` pipelines, double-pass
``(request, response, next)`` pipelines, and standard
``process(request, handler)`` delegates from one ``run()`` method.

Basic usage::

    from weave_adaptor import Adaptor

    class PoweredBy(Adaptor):
        def run(self, request):
            return self.chain(request).with_header("X-Powered-By", "weave")

    mw = PoweredBy()
    mw(request, next)                 # single-pass
    mw(request, response, next)      # double-pass
    mw.process(request, handler)      # standard
"""

__version__ = "0.1.0"
__all__ = [
    "Adaptor",
    "AdaptorConfig",
    "AdaptorError",
    "AnyResponse",
    "ConfigurationError",
    "Convention",
    "Delegate",
    "FunctionAdaptor",
    "InvalidNextHandler",
    "Invocation",
    "LegacyMiddleware",
    "Next",
    "NextHandler",
    "NoActiveInvocation",
    "RequestHandler",
    "StandardMiddleware",
    "adapt",
    "current_invocation",
    "get_invocation",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Adaptor": "weave_adaptor.adaptor",
    "FunctionAdaptor": "weave_adaptor.adaptor",
    "adapt": "weave_adaptor.adaptor",
    "AdaptorConfig": "weave_adaptor.config",
    "AdaptorError": "weave_adaptor.errors",
    "ConfigurationError": "weave_adaptor.errors",
    "InvalidNextHandler": "weave_adaptor.errors",
    "NoActiveInvocation": "weave_adaptor.errors",
    "Convention": "weave_adaptor.context",
    "Invocation": "weave_adaptor.context",
    "current_invocation": "weave_adaptor.context",
    "get_invocation": "weave_adaptor.context",
    "NextHandler": "weave_adaptor.handlers",
    "AnyResponse": "weave_adaptor.protocol",
    "Delegate": "weave_adaptor.protocol",
    "LegacyMiddleware": "weave_adaptor.protocol",
    "Next": "weave_adaptor.protocol",
    "RequestHandler": "weave_adaptor.protocol",
    "StandardMiddleware": "weave_adaptor.protocol",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import weave_adaptor`` cheap while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
