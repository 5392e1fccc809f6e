"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) or structural typing
that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_string_set  # noqa: F821  # unused method (spellfuge/core/config.py:44)
_.check_variant  # noqa: F821  # unused method (spellfuge/core/config.py:53)
_.check_output_format  # noqa: F821  # unused method (spellfuge/core/config.py:60)
_.expand_paths  # noqa: F821  # unused method (spellfuge/core/config.py:67)

# Pydantic model validators - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (spellfuge/core/config.py:72)
_.check_replacement  # noqa: F821  # unused method (spellfuge/matching/overrides.py:48)

# Pydantic model_config class variables - read by framework at class definition time
model_config  # noqa: F821  # unused variable (spellfuge/core/config.py:17)
model_config  # noqa: F821  # unused variable (spellfuge/core/types.py:37)
model_config  # noqa: F821  # unused variable (spellfuge/matching/overrides.py:30)

# Protocol members - implemented by backends, called through the protocol types
_.pseudo_probability  # noqa: F821  # unused method (spellfuge/core/protocols.py)
_.synthesize  # noqa: F821  # unused method (spellfuge/core/protocols.py)

# Public API kept for library users
_.is_capitalized  # noqa: F821  # unused property (spellfuge/core/types.py:64)
