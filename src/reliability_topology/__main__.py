import sys

from reliability_topology.cli import main

sys.exit(main())
