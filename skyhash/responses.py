"""Pre-compiled Skyhash response groups and complete responses.

Names without the ``R_`` prefix are response elements that need a metaframe
before them; names with it are complete responses ready to be written.
"""

# Response elements
OKAY = b"!1\n0\n"
NIL = b"!1\n1\n"
OVERWRITE_ERR = b"!1\n2\n"
ACTION_ERR = b"!1\n3\n"
PACKET_ERR = b"!1\n4\n"
SERVER_ERR = b"!1\n5\n"
OTHER_ERR_EMPTY = b"!1\n6\n"
HEYA = b"+4\nHEY!\n"
UNKNOWN_ACTION = b"!14\nUnknown action\n"
WRONGTYPE_ERR = b"!1\n7\n"
UNKNOWN_DATA_TYPE = b"!1\n8\n"
ENCODING_ERROR = b"!1\n9\n"
SNAPSHOT_BUSY = b"!17\nerr-snapshot-busy\n"
SNAPSHOT_DISABLED = b"!21\nerr-snapshot-disabled\n"
SNAPSHOT_ILLEGAL_NAME = b"!25\nerr-invalid-snapshot-name\n"
ERR_ACCESS_AFTER_TERMSIG = b"!24\nerr-access-after-termsig\n"

# Keyspace related elements
DEFAULT_UNSET = b"!23\ndefault-container-unset\n"
CONTAINER_NOT_FOUND = b"!19\ncontainer-not-found\n"
STILL_IN_USE = b"!12\nstill-in-use\n"
PROTECTED_OBJECT = b"!20\nerr-protected-object\n"
WRONG_MODEL = b"!11\nwrong-model\n"
ALREADY_EXISTS = b"!18\nerr-already-exists\n"
NOT_READY = b"!9\nnot-ready\n"
DDL_TRANSACTIONAL_FAILURE = b"!21\ntransactional-failure\n"
UNKNOWN_DDL_QUERY = b"!17\nunknown-ddl-query\n"
BAD_EXPRESSION = b"!20\nmalformed-expression\n"
UNKNOWN_MODEL = b"!13\nunknown-model\n"
TOO_MANY_ARGUMENTS = b"!13\ntoo-many-args\n"
CONTAINER_NAME_TOO_LONG = b"!23\ncontainer-name-too-long\n"
BAD_CONTAINER_NAME = b"!18\nbad-container-name\n"
UNKNOWN_INSPECT_QUERY = b"!21\nunknown-inspect-query\n"
UNKNOWN_PROPERTY = b"!16\nunknown-property\n"
KEYSPACE_NOT_EMPTY = b"!18\nkeyspace-not-empty\n"

# Complete responses
R_OKAY = b"*1\n!1\n0\n"
R_NIL = b"*1\n!1\n1\n"
R_OVERWRITE_ERR = b"*1\n!1\n2\n"
R_ACTION_ERR = b"*1\n!1\n3\n"
R_PACKET_ERR = b"*1\n!1\n4\n"
R_SERVER_ERR = b"*1\n!1\n5\n"
R_OTHER_ERR_EMPTY = b"*1\n!1\n6\n"
R_WRONGTYPE_ERR = b"*1\n!1\n7"
R_UNKNOWN_DATA_TYPE = b"*1\n!1\n8\n"
R_HEYA = b"*1\n+4\nHEY!\n"
R_UNKNOWN_ACTION = b"*1\n!14\nUnknown action\n"
R_ONE_INT_REPLY = b"*1\n:1\n1\n"
R_ZERO_INT_REPLY = b"*1\n:1\n0\n"
R_SNAPSHOT_BUSY = b"*1\n!17\nerr-snapshot-busy\n"
R_SNAPSHOT_DISABLED = b"*1\n!21\nerr-snapshot-disabled\n"
R_SNAPSHOT_ILLEGAL_NAME = b"*1\n!25\nerr-invalid-snapshot-name\n"
R_ERR_ACCESS_AFTER_TERMSIG = b"*1\n!24\nerr-access-after-termsig\n"