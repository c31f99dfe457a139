"""
Constants for join planning.
"""

# Separator between a resource name and a field name
QUALIFIER_SEPARATOR = "."

# Separator between the two sides of an "on" clause
CLAUSE_SEPARATOR = "="

# Supported descriptor file extensions
SUPPORTED_JSON_EXTENSIONS = [".json"]
SUPPORTED_YAML_EXTENSIONS = [".yaml", ".yml"]

# Conventional descriptor file name
DEFAULT_DESCRIPTOR_FILE = "datapackage.json"

# Configuration
CONFIG_TOOL_SECTION = "dpjoins"
ENV_PREFIX = "DPJOINS_"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
