from kinarow.main import main

raise SystemExit(main())
