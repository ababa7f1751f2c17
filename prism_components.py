"""
Prism language catalog (components.json, "languages" section).

Each key is the canonical component id used in the CDN path
``components/prism-<id>.min.js``. ``alias`` may be a string or a list of
strings; ``require`` lists grammars the component extends and is not used
when resolving fence tags. The ``meta`` record describes the component path
layout and is not a language.
"""

PRISM_VERSION = "1.29.0"

LANGUAGES = {
    "meta": {"path": "components/prism-{id}", "noCSS": True, "examplesPath": "examples/prism-{id}", "addCheckAll": True},
    "markup": {"title": "Markup", "alias": ["html", "xml", "svg", "mathml", "ssml", "atom", "rss"]},
    "css": {"title": "CSS"},
    "clike": {"title": "C-like"},
    "javascript": {"title": "JavaScript", "require": "clike", "alias": "js"},
    "abap": {"title": "ABAP"},
    "abnf": {"title": "ABNF"},
    "actionscript": {"title": "ActionScript", "require": "javascript"},
    "ada": {"title": "Ada"},
    "agda": {"title": "Agda"},
    "al": {"title": "AL"},
    "antlr4": {"title": "ANTLR4", "alias": "g4"},
    "apacheconf": {"title": "Apache Configuration"},
    "apex": {"title": "Apex", "require": ["clike", "sql"]},
    "apl": {"title": "APL"},
    "applescript": {"title": "AppleScript"},
    "aql": {"title": "AQL"},
    "arduino": {"title": "Arduino", "require": "cpp", "alias": "ino"},
    "arff": {"title": "ARFF"},
    "armasm": {"title": "ARM Assembly", "alias": "arm-asm"},
    "arturo": {"title": "Arturo", "alias": "art"},
    "asciidoc": {"title": "AsciiDoc", "alias": "adoc"},
    "aspnet": {"title": "ASP.NET (C#)", "require": ["markup", "csharp"]},
    "asm6502": {"title": "6502 Assembly"},
    "asmatmel": {"title": "Atmel AVR Assembly"},
    "autohotkey": {"title": "AutoHotkey"},
    "autoit": {"title": "AutoIt"},
    "avisynth": {"title": "AviSynth", "alias": "avs"},
    "avro-idl": {"title": "Avro IDL", "alias": "avdl"},
    "awk": {"title": "AWK", "alias": "gawk"},
    "bash": {"title": "Bash", "alias": ["sh", "shell"]},
    "basic": {"title": "BASIC"},
    "batch": {"title": "Batch"},
    "bbcode": {"title": "BBcode", "alias": "shortcode"},
    "bbj": {"title": "BBj"},
    "bicep": {"title": "Bicep"},
    "birb": {"title": "Birb", "require": "clike"},
    "bison": {"title": "Bison", "require": "c"},
    "bnf": {"title": "BNF", "alias": "rbnf"},
    "bqn": {"title": "BQN"},
    "brainfuck": {"title": "Brainfuck"},
    "brightscript": {"title": "BrightScript"},
    "bro": {"title": "Bro"},
    "bsl": {"title": "BSL (1C:Enterprise)", "alias": "oscript"},
    "c": {"title": "C", "require": "clike"},
    "csharp": {"title": "C#", "require": "clike", "alias": ["cs", "dotnet"]},
    "cpp": {"title": "C++", "require": "c"},
    "cfscript": {"title": "CFScript", "require": "clike", "alias": "cfc"},
    "chaiscript": {"title": "ChaiScript", "require": ["clike", "cpp"]},
    "cil": {"title": "CIL"},
    "cilkc": {"title": "Cilk/C", "require": "c", "alias": "cilk-c"},
    "cilkcpp": {"title": "Cilk/C++", "require": "cpp", "alias": ["cilk-cpp", "cilk"]},
    "clojure": {"title": "Clojure"},
    "cmake": {"title": "CMake"},
    "cobol": {"title": "COBOL"},
    "coffeescript": {"title": "CoffeeScript", "require": "javascript", "alias": "coffee"},
    "concurnas": {"title": "Concurnas", "alias": "conc"},
    "csp": {"title": "Content-Security-Policy"},
    "cooklang": {"title": "Cooklang"},
    "coq": {"title": "Coq"},
    "crystal": {"title": "Crystal", "require": "ruby"},
    "css-extras": {"title": "CSS Extras", "require": "css"},
    "csv": {"title": "CSV"},
    "cue": {"title": "CUE"},
    "cypher": {"title": "Cypher"},
    "d": {"title": "D", "require": "clike"},
    "dart": {"title": "Dart", "require": "clike"},
    "dataweave": {"title": "DataWeave"},
    "dax": {"title": "DAX"},
    "dhall": {"title": "Dhall"},
    "diff": {"title": "Diff"},
    "django": {"title": "Django/Jinja2", "require": "markup-templating", "alias": "jinja2"},
    "dns-zone-file": {"title": "DNS zone file", "alias": "dns-zone"},
    "docker": {"title": "Docker", "alias": "dockerfile"},
    "dot": {"title": "DOT (Graphviz)", "alias": "gv"},
    "ebnf": {"title": "EBNF"},
    "editorconfig": {"title": "EditorConfig"},
    "eiffel": {"title": "Eiffel"},
    "ejs": {"title": "EJS", "require": ["javascript", "markup-templating"], "alias": "eta"},
    "elixir": {"title": "Elixir"},
    "elm": {"title": "Elm"},
    "etlua": {"title": "Embedded Lua templating", "require": ["lua", "markup-templating"]},
    "erb": {"title": "ERB", "require": ["ruby", "markup-templating"]},
    "erlang": {"title": "Erlang"},
    "excel-formula": {"title": "Excel Formula", "alias": ["xlsx", "xls"]},
    "fsharp": {"title": "F#", "require": "clike"},
    "factor": {"title": "Factor"},
    "false": {"title": "False"},
    "firestore-security-rules": {"title": "Firestore security rules", "require": "clike"},
    "flow": {"title": "Flow", "require": "javascript"},
    "fortran": {"title": "Fortran"},
    "ftl": {"title": "FreeMarker Template Language", "require": "markup-templating"},
    "gml": {"title": "GameMaker Language", "require": "clike", "alias": "gamemakerlanguage"},
    "gap": {"title": "GAP (CAS)"},
    "gcode": {"title": "G-code"},
    "gdscript": {"title": "GDScript"},
    "gedcom": {"title": "GEDCOM"},
    "gettext": {"title": "gettext", "alias": "po"},
    "gherkin": {"title": "Gherkin"},
    "git": {"title": "Git"},
    "glsl": {"title": "GLSL", "require": "c"},
    "gn": {"title": "GN", "alias": "gni"},
    "linker-script": {"title": "GNU Linker Script", "alias": "ld"},
    "go": {"title": "Go", "require": "clike"},
    "go-module": {"title": "Go module", "alias": "go-mod"},
    "gradle": {"title": "Gradle", "require": "clike"},
    "graphql": {"title": "GraphQL"},
    "groovy": {"title": "Groovy", "require": "clike"},
    "haml": {"title": "Haml", "require": "ruby"},
    "handlebars": {"title": "Handlebars", "require": "markup-templating", "alias": ["hbs", "mustache"]},
    "haskell": {"title": "Haskell", "alias": "hs"},
    "haxe": {"title": "Haxe", "require": "clike"},
    "hcl": {"title": "HCL"},
    "hlsl": {"title": "HLSL", "require": "c"},
    "hoon": {"title": "Hoon"},
    "http": {"title": "HTTP"},
    "hpkp": {"title": "HTTP Public-Key-Pins"},
    "hsts": {"title": "HTTP Strict-Transport-Security"},
    "ichigojam": {"title": "IchigoJam"},
    "icon": {"title": "Icon"},
    "icu-message-format": {"title": "ICU Message Format"},
    "idris": {"title": "Idris", "require": "haskell", "alias": "idr"},
    "ignore": {"title": ".ignore", "alias": ["gitignore", "hgignore", "npmignore"]},
    "inform7": {"title": "Inform 7"},
    "ini": {"title": "Ini"},
    "io": {"title": "Io"},
    "j": {"title": "J"},
    "java": {"title": "Java", "require": "clike"},
    "javadoc": {"title": "JavaDoc", "require": ["markup", "java", "javadoclike"]},
    "javadoclike": {"title": "JavaDoc-like"},
    "javastacktrace": {"title": "Java stack trace"},
    "jexl": {"title": "Jexl"},
    "jolie": {"title": "Jolie", "require": "clike"},
    "jq": {"title": "JQ"},
    "jsdoc": {"title": "JSDoc", "require": ["javascript", "javadoclike", "typescript"]},
    "js-extras": {"title": "JS Extras", "require": "javascript"},
    "json": {"title": "JSON", "alias": "webmanifest"},
    "json5": {"title": "JSON5", "require": "json"},
    "jsonp": {"title": "JSONP", "require": "json"},
    "jsstacktrace": {"title": "JS stack trace"},
    "js-templates": {"title": "JS Templates", "require": "javascript"},
    "julia": {"title": "Julia"},
    "keepalived": {"title": "Keepalived Configure"},
    "keyman": {"title": "Keyman"},
    "kotlin": {"title": "Kotlin", "require": "clike", "alias": ["kt", "kts"]},
    "kumir": {"title": "KuMir (КуМир)", "alias": "kum"},
    "kusto": {"title": "Kusto"},
    "latex": {"title": "LaTeX", "alias": ["tex", "context"]},
    "latte": {"title": "Latte", "require": ["clike", "markup-templating", "php"]},
    "less": {"title": "Less", "require": "css"},
    "lilypond": {"title": "LilyPond", "require": "scheme", "alias": "ly"},
    "liquid": {"title": "Liquid", "require": "markup-templating"},
    "lisp": {"title": "Lisp", "alias": ["emacs", "elisp", "emacs-lisp"]},
    "livescript": {"title": "LiveScript"},
    "llvm": {"title": "LLVM IR"},
    "log": {"title": "Log file"},
    "lolcode": {"title": "LOLCODE"},
    "lua": {"title": "Lua"},
    "magma": {"title": "Magma (CAS)"},
    "makefile": {"title": "Makefile"},
    "markdown": {"title": "Markdown", "require": "markup", "alias": "md"},
    "markup-templating": {"title": "Markup templating", "require": "markup"},
    "mata": {"title": "Mata"},
    "matlab": {"title": "MATLAB"},
    "maxscript": {"title": "MAXScript"},
    "mel": {"title": "MEL"},
    "mermaid": {"title": "Mermaid"},
    "metafont": {"title": "METAFONT"},
    "mizar": {"title": "Mizar"},
    "mongodb": {"title": "MongoDB", "require": "javascript"},
    "monkey": {"title": "Monkey"},
    "moonscript": {"title": "MoonScript", "alias": "moon"},
    "n1ql": {"title": "N1QL"},
    "n4js": {"title": "N4JS", "require": "javascript", "alias": "n4jsd"},
    "nand2tetris-hdl": {"title": "Nand To Tetris HDL"},
    "naniscript": {"title": "Naninovel Script", "alias": "nani"},
    "nasm": {"title": "NASM"},
    "neon": {"title": "NEON"},
    "nevod": {"title": "Nevod"},
    "nginx": {"title": "nginx"},
    "nim": {"title": "Nim"},
    "nix": {"title": "Nix"},
    "nsis": {"title": "NSIS"},
    "objectivec": {"title": "Objective-C", "require": "c", "alias": "objc"},
    "ocaml": {"title": "OCaml"},
    "odin": {"title": "Odin"},
    "opencl": {"title": "OpenCL", "require": "c"},
    "openqasm": {"title": "OpenQasm", "alias": "qasm"},
    "oz": {"title": "Oz"},
    "parigp": {"title": "PARI/GP"},
    "parser": {"title": "Parser", "require": "markup"},
    "pascal": {"title": "Pascal", "alias": "objectpascal"},
    "pascaligo": {"title": "Pascaligo"},
    "psl": {"title": "PATROL Scripting Language"},
    "pcaxis": {"title": "PC-Axis", "alias": "px"},
    "peoplecode": {"title": "PeopleCode", "alias": "pcode"},
    "perl": {"title": "Perl"},
    "php": {"title": "PHP", "require": "markup-templating"},
    "phpdoc": {"title": "PHPDoc", "require": ["php", "javadoclike"]},
    "php-extras": {"title": "PHP Extras", "require": "php"},
    "plant-uml": {"title": "PlantUML", "alias": "plantuml"},
    "plsql": {"title": "PL/SQL", "require": "sql"},
    "powerquery": {"title": "PowerQuery", "alias": ["pq", "mscript"]},
    "powershell": {"title": "PowerShell"},
    "processing": {"title": "Processing", "require": "clike"},
    "prolog": {"title": "Prolog"},
    "promql": {"title": "PromQL"},
    "properties": {"title": ".properties"},
    "protobuf": {"title": "Protocol Buffers", "require": "clike"},
    "pug": {"title": "Pug", "require": ["markup", "javascript"]},
    "puppet": {"title": "Puppet"},
    "pure": {"title": "Pure"},
    "purebasic": {"title": "PureBasic", "require": "clike", "alias": "pbfasm"},
    "purescript": {"title": "PureScript", "require": "haskell", "alias": "purs"},
    "python": {"title": "Python", "alias": "py"},
    "qsharp": {"title": "Q#", "require": "clike", "alias": "qs"},
    "q": {"title": "Q (kdb+ database)"},
    "qml": {"title": "QML", "require": "javascript"},
    "qore": {"title": "Qore", "require": "clike"},
    "r": {"title": "R"},
    "racket": {"title": "Racket", "require": "scheme", "alias": "rkt"},
    "cshtml": {"title": "Razor C#", "require": ["markup", "csharp"], "alias": "razor"},
    "jsx": {"title": "React JSX", "require": ["markup", "javascript"]},
    "tsx": {"title": "React TSX", "require": ["jsx", "typescript"]},
    "reason": {"title": "Reason", "require": "clike"},
    "regex": {"title": "Regex"},
    "rego": {"title": "Rego"},
    "renpy": {"title": "Ren'py", "alias": "rpy"},
    "rescript": {"title": "ReScript", "alias": "res"},
    "rest": {"title": "reST (reStructuredText)"},
    "rip": {"title": "Rip"},
    "roboconf": {"title": "Roboconf"},
    "robotframework": {"title": "Robot Framework", "alias": "robot"},
    "ruby": {"title": "Ruby", "require": "clike", "alias": "rb"},
    "rust": {"title": "Rust"},
    "sas": {"title": "SAS"},
    "sass": {"title": "Sass (Sass)", "require": "css"},
    "scss": {"title": "Sass (SCSS)", "require": "css"},
    "scala": {"title": "Scala", "require": "java"},
    "scheme": {"title": "Scheme"},
    "shell-session": {"title": "Shell session", "require": "bash", "alias": ["sh-session", "shellsession"]},
    "smali": {"title": "Smali"},
    "smalltalk": {"title": "Smalltalk"},
    "smarty": {"title": "Smarty", "require": "markup-templating"},
    "sml": {"title": "SML", "alias": "smlnj"},
    "solidity": {"title": "Solidity (Ethereum)", "require": "clike", "alias": "sol"},
    "solution-file": {"title": "Solution file", "alias": "sln"},
    "soy": {"title": "Soy (Closure Template)", "require": "markup-templating"},
    "sparql": {"title": "SPARQL", "require": "turtle", "alias": "rq"},
    "splunk-spl": {"title": "Splunk SPL"},
    "sqf": {"title": "SQF: Status Quo Function (Arma 3)", "require": "clike"},
    "sql": {"title": "SQL"},
    "squirrel": {"title": "Squirrel", "require": "clike"},
    "stan": {"title": "Stan"},
    "stata": {"title": "Stata Ado", "require": ["mata", "java", "python"]},
    "iecst": {"title": "Structured Text (IEC 61131-3)"},
    "stylus": {"title": "Stylus"},
    "supercollider": {"title": "SuperCollider", "alias": "sclang"},
    "swift": {"title": "Swift"},
    "systemd": {"title": "Systemd configuration file"},
    "t4-templating": {"title": "T4 templating"},
    "t4-cs": {"title": "T4 Text Templates (C#)", "require": ["t4-templating", "csharp"], "alias": "t4"},
    "t4-vb": {"title": "T4 Text Templates (VB)", "require": ["t4-templating", "vbnet"]},
    "tap": {"title": "TAP", "require": "yaml"},
    "tcl": {"title": "Tcl"},
    "tt2": {"title": "Template Toolkit 2", "require": ["clike", "markup-templating"]},
    "textile": {"title": "Textile", "require": "markup"},
    "toml": {"title": "TOML"},
    "tremor": {"title": "Tremor", "alias": ["trickle", "troy"]},
    "turtle": {"title": "Turtle", "alias": "trig"},
    "twig": {"title": "Twig", "require": "markup-templating"},
    "typescript": {"title": "TypeScript", "require": "javascript", "alias": "ts"},
    "typoscript": {"title": "TypoScript", "alias": "tsconfig"},
    "unrealscript": {"title": "UnrealScript", "alias": ["uscript", "uc"]},
    "uorazor": {"title": "UO Razor Script"},
    "uri": {"title": "URI", "alias": "url"},
    "v": {"title": "V", "require": "clike"},
    "vala": {"title": "Vala", "require": "clike"},
    "vbnet": {"title": "VB.Net", "require": "basic"},
    "velocity": {"title": "Velocity", "require": "markup"},
    "verilog": {"title": "Verilog"},
    "vhdl": {"title": "VHDL"},
    "vim": {"title": "vim"},
    "visual-basic": {"title": "Visual Basic", "alias": ["vb", "vba"]},
    "warpscript": {"title": "WarpScript"},
    "wasm": {"title": "WebAssembly"},
    "web-idl": {"title": "Web IDL", "alias": "webidl"},
    "wgsl": {"title": "WGSL"},
    "wiki": {"title": "Wiki markup", "require": "markup"},
    "wolfram": {"title": "Wolfram language", "alias": ["mathematica", "nb", "wl"]},
    "wren": {"title": "Wren"},
    "xeora": {"title": "Xeora", "require": "markup", "alias": "xeoracube"},
    "xml-doc": {"title": "XML doc (.net)", "require": "markup"},
    "xojo": {"title": "Xojo (REALbasic)"},
    "xquery": {"title": "XQuery", "require": "markup"},
    "yaml": {"title": "YAML", "alias": "yml"},
    "yang": {"title": "YANG"},
    "zig": {"title": "Zig"},
}
