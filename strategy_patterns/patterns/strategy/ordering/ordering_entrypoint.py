import logging
from typing import Optional

from strategy_patterns.common.common_utilities import common_utilities
import strategy_patterns.patterns.strategy.ordering.src.ordering_utilities as utilities
from strategy_patterns.patterns.strategy.ordering.src.ordering_job import OrderingJob


def main(args: Optional[list[str]] = None) -> dict[str, list[str]]:
    logging.info("Starting argument parsing.")
    job_args = utilities.JobArguments.from_args(args)
    logging.info("Argument parsing completed successfully.")

    # Instantiate job
    job = OrderingJob(job_args=job_args)

    # Execute job
    try:
        logging.info(f"Initializing `{job_args.job_name}` job.")
        results = job.run()
    except Exception as e:
        logging.exception("An error has occurred.", exc_info=e)
        raise e
    else:
        logging.info("Job successful.")

    return results


def cli():
    common_utilities.setup_logging()
    main()


if __name__ == "__main__":
    cli()
