"""
The devd wire protocol: newline terminated ASCII lines, reassembled from the socket and
parsed into events.
"""
