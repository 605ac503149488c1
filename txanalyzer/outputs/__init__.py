# txanalyzer/outputs/__init__.py
from importlib import import_module

def get_output(target, config):
    """
    Instantiate the report writer registered for target ("console", "json")
    under config['output_modules']; writers receive the whole config.
    """
    module_name, cls_name = config['output_modules'][target].rsplit('.', 1)
    return getattr(import_module(module_name), cls_name)(config)
