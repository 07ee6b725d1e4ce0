# noahkit

`noahkit` provides the building blocks of the Noah archiver front end. It covers
path handling, command-line splitting and a small script interpreter. It also covers
the presentation of an archive's member list, file-type associations, and installing
and removing the program's files.

## Modules

- `noahkit.paths` works on path strings. Both `\` and `/` count as separators.
  - `name`, `ext`, `ext_all`, `body` and `body_all` take apart file names. A
    leading dot never starts an extension.
  - `dir_only`, `with_backslash`, `ends_with_separator` and `is_in_same_dir` deal
    with the directory part.
  - `format_int(1234567, True)` gives `"1,234,567"`.
  - `remove_trailing_ws` and `replace_to_slash` round it out.
- `noahkit.cmdline` splits a command line on spaces, honouring double quotes.
  `parse_command_line(command, ignore_first)` returns a `ParsedCommand` with
  `options`, the words starting with `-`, and `params`, the rest.
- `noahkit.rythp` is an interpreter for Rythp, a tiny parenthesised script language.
  Every value is a string, and variables have one-character names (`%c`).
  - The built-in functions are `exec`, `while`, `if`, `let`, `=`, `between`, `<`,
    `>`, `!`, `+`, `-`, `*`, `/`, `mod` and `slash`.
  - Subclass `RythpVM` and override `exec_function` to add functions.

  ```python
  from noahkit.rythp import RythpVM

  vm = RythpVM()
  vm.eval("+ 1 (* 2 3)")              # "7"
  vm.eval("if (< 1 2) yes no")        # "yes"
  ```

  The helpers `to_int`, `quote`, `unquote` and `split_args` are available on their own.
- `noahkit.arcinfo` defines what archiver back ends share:
  - the result codes `ArcError` and `is_error`;
  - the `ArchiveEntry` record for one archive member;
  - `dos_datetime`, which decodes DOS date and time stamps.
- `noahkit.arcview` prepares the listing of an archive's members.
  - `build_rows` makes one `ListRow` per file member. The column text comes from
    `format_size`, `format_timestamp` and `format_ratio`.
  - `compare_entries` compares two entries by a `SortColumn`.
  - `ArchiveSorter.sort` sorts by a column. Sorting again by the same column
    reverses the order.
  - `help_contents_companion` finds the `.cnt` file that belongs with a selected
    `.hlp` file.
  - `drop_file_list` and `send_to_arguments` build the file lists handed to
    drag-and-drop and "Send To".
  - `compression_percent` and `melt_error_message` give the status and error texts.
- `noahkit.assoc` manages the shell-extension switches and file-type associations.
  - The settings are kept in a `Registry`, an in-memory tree of case-insensitive
    keys with string values.
  - `AssociationManager` loads and saves them, per standard `ArchiveKind` or per
    single extension. When zip or cab is dissociated, the system's default binding
    comes back if the registry still holds it.
  - `menu_command`, `context_menu_items` and `build_noah_command` describe the
    context-menu entries and the command line they run.
- `noahkit.installer` copies the program's files to a destination and removes them
  again. The helper functions are:
  - `copy_tree`, which stages a locked `.dll` as `.new`;
  - `adjust_manual`;
  - `remove_installation`;
  - `select_action`, `b2e_extensions` and `is_valid_install_path`;
  - `pending_delete_entries` and `pending_replace_entries`, which build the
    rename entries for restart-time replacement.

## Command

```
noahkit-install -i C:\Noah\ [SOURCE]   # copy SOURCE (default: the program's directory) to the destination
noahkit-install -u <directory>         # remove the installed files from a directory
noahkit-install                        # ask, then start the uninstaller for the program's directory
```

The install destination must be a full drive path such as `C:\Noah\`. Files that
cannot be replaced or removed right away are listed so they can be dealt with after
a restart.

## What it does not do

- `noahkit` does not pack or extract archives itself. It has no archiver back end;
  `ArchiveEntry` and `ArcError` only describe what such a back end reports.
- There is no graphical window. `noahkit.arcview` produces the texts and orderings
  a view would show, but does not display them.
- `Registry` lives in memory only. Nothing is read from or written to the operating
  system's registry.
- The installer does not create shortcuts, does not record uninstall information,
  and does not write restart-time rename entries to any system file. It only prints
  which files are left over.

## Tests

```
pip install -e .[test]
pytest
```