from .process_details import ProcessDetails

__all__ = ["ProcessDetails"]
