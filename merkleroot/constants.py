# Padding node appended once when the leaf count is odd; hashed as b"".
PADDING_NODE = ""

# Encoding of hex digests when concatenated into a parent's hash input
NODE_ENCODING = "ascii"

# Process exit statuses
EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2
