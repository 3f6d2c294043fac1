"""Rendering support for PEM blocks.

Contains:
- decoder_iface: the Decoder Protocol the dispatcher calls
- options: DecodeConfig, the immutable run configuration
- openssl: CommandDecoder and the default openssl decoders
- artifacts: scoped temp files handed to decoders
- renderer: the Dispatcher
"""
