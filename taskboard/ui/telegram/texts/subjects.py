ASK_NAME = "Subject name?"
ADDED = "Subject added."
DELETED = "Subject removed."
REGISTRY_HEADER = "<b>Saved subjects</b>"
NO_SUBJECTS = "No saved subjects yet."
ASK_RENAME = "New name for <b>{name}</b>?"
RENAMED = "Subject renamed."
