from .capability import ProcessDetailsAware, inject_process_details

__all__ = ["ProcessDetailsAware", "inject_process_details"]
