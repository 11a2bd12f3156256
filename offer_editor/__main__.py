from offer_editor.cli import main

raise SystemExit(main())
