from staticdoc.main import main

raise SystemExit(main())
