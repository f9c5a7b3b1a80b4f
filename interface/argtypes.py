from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL

log_levels = {
	"trace": DEBUG,
	"debug": DEBUG,
	"info": INFO,
	"warn": WARNING,
	"warning": WARNING,
	"error": ERROR,
	"off": CRITICAL + 1,
}

def natural(string):
	value = int(string)
	if value > 0:
		return value
	raise ValueError()

def log_level(string):
	value = string.strip().lower()
	if value in log_levels:
		return log_levels[value]
	raise ValueError()
