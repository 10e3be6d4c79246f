from udc.cli import main

raise SystemExit(main())
