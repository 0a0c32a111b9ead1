"""Operations for skillkit.

Import from submodules:
- location: PROJECT_ROOT_MARKERS, find_project_root, resolve_install_location
- materialize: copy_required, copy_declared, copy_tree, remove_all
- lifecycle: InstallResult, UninstallResult, install_skill, uninstall_skill
"""
