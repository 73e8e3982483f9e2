"""Platform services shared by features and interfaces."""
