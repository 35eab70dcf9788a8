# -*- coding: utf-8 -*-
import importlib


def install_lazy_loader(globals_dict, lazy_map):
    """
    Install __getattr__, __dir__ and __all__ so that the names exported by
    a package are imported from their defining submodule on first access.

    Args:
        globals_dict: The globals() of the current module.
                      Pass the globals() from the module where this is called.
        lazy_map: dict[name, module_path], module paths may be relative to
                  the calling package.
    """
    __all__ = list(lazy_map.keys())

    def __getattr__(name):
        if name in lazy_map:
            module = importlib.import_module(
                lazy_map[name],
                globals_dict["__name__"],
            )

            obj = getattr(module, name)
            # Cache in globals to avoid reloading
            globals_dict[name] = obj
            return obj

        raise AttributeError(
            f"module {globals_dict['__name__']} has no attribute {name}",
        )

    def __dir__():
        return sorted(set(globals_dict) | set(__all__))

    # Modify the globals of the calling module
    globals_dict["__all__"] = __all__
    globals_dict["__getattr__"] = __getattr__
    globals_dict["__dir__"] = __dir__
