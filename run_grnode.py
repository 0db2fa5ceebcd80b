#!/usr/bin/env python3
"""
Wrapper script to run grnode directly from the project directory.

This script allows you to run grnode without installing it:
    python run_grnode.py render -n nodes.txt -e edges.txt -o graph.svg
    python run_grnode.py preview
    python run_grnode.py --help
"""

import sys
from pathlib import Path

# Add src directory to Python path so we can import grnode
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

try:
    from grnode.cli import main
except ImportError as e:
    print(f"❌ Error importing grnode: {e}")
    print("\n💡 Make sure you have installed dependencies:")
    print("   pip install -e .")
    sys.exit(1)

if __name__ == "__main__":
    main()
