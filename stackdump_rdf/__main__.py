import sys

from .xml_to_rdf import main

sys.exit(main())
