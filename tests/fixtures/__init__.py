"""Consumer classes used across the shared-state tests.

- ``Player`` belongs to both capability sets
- ``EnemySpawner`` belongs to the counter capability set only
- ``StatusBar`` belongs to neither and only holds a public view
"""

from __future__ import annotations
