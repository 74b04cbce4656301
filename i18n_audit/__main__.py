from i18n_audit.main import run

run()
