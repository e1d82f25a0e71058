"""
Example of listing what an OCIO config offers
"""

import sys
from pathlib import Path

from crispen_bridge import BridgeError, describe_config, load_config


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    
    try:
        config = load_config(path=path)
    except BridgeError as e:
        print(f"✗ Failed: {e}")
        return
    
    summary = describe_config(config)
    print(f"Config:          {summary.source}")
    print(f"Color spaces:    {len(summary.color_spaces)}")
    print("=" * 60)
    
    for display in summary.displays:
        marker = "*" if display == summary.default_display else " "
        print(f"{marker} {display}")
        for view in summary.views[display]:
            default = " (default)" if view == summary.default_views.get(display) else ""
            print(f"    {view}{default}")
    
    if summary.roles:
        print("\nRoles:")
        for role, space in sorted(summary.roles.items()):
            print(f"  {role:<20} {space}")


if __name__ == "__main__":
    main()
