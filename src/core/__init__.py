"""Core runtime for the browser operator.

Provided submodules:

* :mod:`src.core.config` - structured configuration package
* :mod:`src.core.context` - chat history windowing
* :mod:`src.core.browser` - remote browser session provider client
* :mod:`src.core.chat` - chat runtime and message helpers
* :mod:`src.core.llm` - chat model client factory
* :mod:`src.core.system` - logging and session lifecycle
"""
