from ascii_filter.cli import main

raise SystemExit(main())
