from fedi_hearts.cli import main

raise SystemExit(main())
