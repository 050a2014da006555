from lotto649.cli import main

raise SystemExit(main())
