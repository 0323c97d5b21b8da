from __future__ import annotations

# Well-known keys in the global namespace of a group's context store.
BINARY_KEY = "cockroach_binary"
STORE_DIR_KEY = "cockroach_store_dir"
PROCESS_KEY = "cockroach_process"
PROCESS_DETAILS_KEY = "cockroach_details"
