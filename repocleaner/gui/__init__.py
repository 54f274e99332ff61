"""GTK 4 / libadwaita front end."""
