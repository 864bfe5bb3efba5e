__title__ = "restclient"
__description__ = "One-shot HTTP calls over a per-call connection."
__version__ = "0.5.2"
