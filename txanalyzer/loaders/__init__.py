# txanalyzer/loaders/__init__.py
from importlib import import_module

def get_loader(fmt, config):
    """
    Instantiate the loader registered for an input format ("json", "csv",
    "yaml") under config['loaders'] as a dotted module.Class path.
    """
    module_name, cls_name = config['loaders'][fmt].rsplit('.', 1)
    return getattr(import_module(module_name), cls_name)()
