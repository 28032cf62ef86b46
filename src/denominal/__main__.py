from denominal.cli import main

raise SystemExit(main())
