# Process-wide settings and runtime state, populated by zfscli/__init__.py
storage = {}
