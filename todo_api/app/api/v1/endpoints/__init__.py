"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one resource; ``router.py`` at the
package level aggregates them.
"""
